"""
cozo_client.db.text_query_client
--------------------------------

基于 HTTP 文本查询接口（POST {host}/text-query）的查询客户端。

设计原则：
- 仅依赖标准库、pandas 与 requests；
- 不读取配置文件与环境变量，所有配置由调用方通过 ClientConfig 注入；
- 脚本与参数原样透传，不解析、不校验查询语义。
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Optional, Union

import pandas as pd
import requests

from cozo_client.logger import get_logger

_logger = get_logger(__name__)

DEFAULT_HOST = "http://127.0.0.1:9070"
TEXT_QUERY_PATH = "/text-query"


@dataclass(frozen=True)
class ClientConfig:
    """
    文本查询客户端配置对象（构造后不可变）。

    输入：
        username: 用户名，写入 x-cozo-username 请求头，默认空字符串。
        password: 密码，写入 x-cozo-password 请求头，默认空字符串。
        host: 服务地址（含协议与端口），默认 http://127.0.0.1:9070。

    说明：
        传入 None 或空字符串的字段在构造时即解析为默认值，调用时不再重复处理。
    """

    username: str = ""
    password: str = ""
    host: str = DEFAULT_HOST

    def __post_init__(self) -> None:
        object.__setattr__(self, "username", self.username or "")
        object.__setattr__(self, "password", self.password or "")
        object.__setattr__(self, "host", self.host or DEFAULT_HOST)

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "ClientConfig":
        """
        由选项字典构造配置，缺失字段使用默认值。

        异常：
            ValueError: 含有未知字段时抛出。
        """
        options = dict(options or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            msg = f"未知的客户端配置字段：{', '.join(unknown)}。可用字段：{', '.join(sorted(known))}。"
            _logger.error(msg)
            raise ValueError(msg)
        return cls(**options)

    @property
    def url(self) -> str:
        return self.host + TEXT_QUERY_PATH

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-cozo-username": self.username,
            "x-cozo-password": self.password,
        }


def _column_label(headers: List[Any], idx: int) -> str:
    if idx < len(headers) and headers[idx]:
        return headers[idx]
    return f"({idx})"


def result_to_records(result: Mapping[str, Any]) -> List[Dict[Any, Any]]:
    """
    将 {"rows": [...], "headers": [...]} 形式的查询结果转换为逐行字典列表。

    输入：
        result: run() 返回的查询结果。
    输出：
        List[dict]：每行一个字典，键为 headers[i]；对应表头缺失或为空时使用 "(i)"。
    """
    headers = list(result.get("headers") or [])
    rows = result.get("rows") or []
    return [
        {_column_label(headers, i): value for i, value in enumerate(row)}
        for row in rows
    ]


def result_to_dataframe(result: Mapping[str, Any]) -> pd.DataFrame:
    """
    将查询结果转换为 DataFrame，列顺序与结果一致。

    各列统一为 object 类型，整数与 null 混合的列不会被转换为浮点数。
    无数据行时返回空 DataFrame；若结果带有 headers，则保留这些列名。
    """
    records = result_to_records(result)
    if records:
        return pd.DataFrame(records, dtype=object)
    headers = list(result.get("headers") or [])
    columns = [_column_label(headers, i) for i in range(len(headers))]
    return pd.DataFrame(columns=columns, dtype=object)


class QueryClient:
    """
    文本查询客户端：向 {host}/text-query 发送脚本并处理返回。

    输入：
        config: ClientConfig、选项字典或 None；
        **options: host / username / password，覆盖 config 为字典时的同名字段。
    输出：
        无（构造器）。URL 与请求头在构造时计算一次，之后只读，可被多线程共享。
    """

    def __init__(
        self,
        config: Union[ClientConfig, Mapping[str, Any], None] = None,
        **options: Any,
    ) -> None:
        if isinstance(config, ClientConfig):
            if options:
                raise TypeError("传入 ClientConfig 时不可再传入其他配置关键字参数。")
            self._config = config
        else:
            merged: Dict[str, Any] = dict(config or {})
            merged.update(options)
            self._config = ClientConfig.from_options(merged)

        self._url = self._config.url
        self._headers = self._config.headers

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def url(self) -> str:
        return self._url

    def run(self, script: str, params: Optional[Mapping[str, Any]] = None) -> Optional[Any]:
        """
        发送一次查询并返回解析后的 JSON 结果。

        输入：
            script: 查询脚本文本，原样发送；
            params: 命名参数字典，缺省为 {}。
        输出：
            状态码为 2xx 时返回响应 JSON（不做结构校验）；
            其他状态码时将响应文本记入错误日志并返回 None。
        异常：
            网络层异常（requests.RequestException）与 2xx 响应 JSON 解码失败（ValueError）
            均不捕获，直接抛给调用方。
        """
        body = {"script": script, "params": dict(params or {})}
        _logger.debug("POST %s", self._url)
        resp = requests.post(self._url, headers=self._headers, json=body)

        if 200 <= resp.status_code < 300:
            return resp.json()

        _logger.error(resp.text)
        return None

    def run_df(self, script: str, params: Optional[Mapping[str, Any]] = None) -> Optional[pd.DataFrame]:
        """同 run()，成功时将结果转换为 DataFrame；失败时返回 None。"""
        result = self.run(script, params)
        if result is None:
            return None
        return result_to_dataframe(result)

    def print(self, script: str, params: Optional[Mapping[str, Any]] = None) -> None:
        """
        执行查询并以表格形式打印到控制台（stdout）。

        失败时 run() 已记录错误日志，此处不再额外输出。
        """
        result = self.run(script, params)
        if result is None:
            return
        print(result_to_dataframe(result).to_string())
