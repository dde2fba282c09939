"""
cozo_client: 文本查询接口（POST {host}/text-query）的轻量客户端。

示例：
    from cozo_client import QueryClient

    client = QueryClient(host="http://127.0.0.1:9070", username="admin", password="secret")
    res = client.run("?[a] <- [[1], [2]]")
    client.print("?[a] <- [[1], [2]]")
"""

from cozo_client.db import (
    DEFAULT_HOST,
    ClientConfig,
    QueryClient,
    export_script_results,
    result_to_dataframe,
    result_to_records,
)
from cozo_client.utils import list_script_files, load_client_config, load_yaml, read_script_file

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_HOST",
    "ClientConfig",
    "QueryClient",
    "export_script_results",
    "list_script_files",
    "load_client_config",
    "load_yaml",
    "read_script_file",
    "result_to_dataframe",
    "result_to_records",
]
