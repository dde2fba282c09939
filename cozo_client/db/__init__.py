"""
cozo_client.db: 文本查询接口相关的底层工具。

当前实现：
- QueryClient：向 {host}/text-query 发送脚本，run 返回 JSON，print 打印表格；
- result_to_records / result_to_dataframe：rows/headers 结果整形；
- export_script_results：批量执行脚本目录并导出 CSV。

注意：
- 不直接读取配置文件，由调用方通过 ClientConfig 或 cozo_client.utils 注入配置。
"""

from __future__ import annotations

from .text_query_client import (
    DEFAULT_HOST,
    ClientConfig,
    QueryClient,
    result_to_dataframe,
    result_to_records,
)
from .export import export_script_results

__all__ = [
    "DEFAULT_HOST",
    "ClientConfig",
    "QueryClient",
    "export_script_results",
    "result_to_dataframe",
    "result_to_records",
]
