"""
cozo_client.utils.config_loader: 配置文件读取（当前为 YAML）。

只负责把文件内容转换为 ClientConfig，不读取环境变量。
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from cozo_client.db.text_query_client import ClientConfig
from cozo_client.logger import get_logger

_logger = get_logger(__name__)


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    读取 YAML 文件并返回字典。

    输入：
    - path: 文件路径，可为 str 或 Path。

    输出：
    - 解析得到的字典；若文件为空或仅包含空文档，返回空字典。

    异常：
    - FileNotFoundError: 路径不存在；
    - yaml.YAMLError: 解析失败时由 PyYAML 抛出。
    """
    path = Path(path)
    if not path.exists():
        msg = f"YAML 文件不存在：{path}"
        _logger.error(msg)
        raise FileNotFoundError(msg)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def load_client_config(
    path: Union[str, Path],
    section: Optional[str] = "server",
) -> ClientConfig:
    """
    从 YAML 文件构造 ClientConfig。

    输入：
    - path: YAML 文件路径；
    - section: 配置所在的顶层键，默认 "server"；为 None 时使用整个文档。

    文件示例：
        server:
          host: http://127.0.0.1:9070
          username: admin
          password: secret

    输出：
    - ClientConfig；section 缺失或为空时全部使用默认值。

    异常：
    - TypeError: section 对应的值不是字典；
    - ValueError: 含有 host/username/password 以外的字段。
    """
    data = load_yaml(path)
    raw = data.get(section) if section is not None else data
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        msg = f"配置段 {section!r} 应为字典，实际为：{type(raw).__name__}（文件：{path}）"
        _logger.error(msg)
        raise TypeError(msg)
    return ClientConfig.from_options(raw)
