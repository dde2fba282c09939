# cozo_client.utils: 通用工具（配置加载、脚本文件读取）

from cozo_client.utils.config_loader import load_client_config, load_yaml
from cozo_client.utils.script_loader import list_script_files, read_script_file

__all__ = ["load_client_config", "load_yaml", "list_script_files", "read_script_file"]
