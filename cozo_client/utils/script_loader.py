"""
cozo_client.utils.script_loader
-------------------------------

查询脚本以独立文件保存（每个文件一段完整脚本，默认后缀 .cozo），
这里负责找到这些文件并读出文本，交给 QueryClient.run 原样发送。
脚本内容不做任何预处理：注释、空行、参数占位符（如 $name）均保持原样。
"""

from __future__ import annotations

from pathlib import Path
from typing import List

DEFAULT_SCRIPT_SUFFIX = ".cozo"


def list_script_files(script_dir: str | Path, suffix: str = DEFAULT_SCRIPT_SUFFIX) -> List[Path]:
    """
    收集一个目录中待执行的脚本文件。

    只看目录第一层；同后缀的子目录会被跳过。返回顺序按文件名排序，
    批量执行时可用 01_、02_ 之类的前缀控制先后。

    输入：
        script_dir: 脚本所在目录；
        suffix: 脚本文件后缀（含点号），默认 ".cozo"。
    输出：
        List[Path]: 脚本文件路径列表，可能为空。
    异常：
        FileNotFoundError: 目录不存在；
        NotADirectoryError: 传入的是文件。
    """
    dir_path = Path(script_dir)
    if not dir_path.exists():
        raise FileNotFoundError(f"脚本目录不存在：{dir_path.absolute()}")
    if not dir_path.is_dir():
        raise NotADirectoryError(f"脚本目录参数指向的是文件：{dir_path.absolute()}")

    return sorted(p for p in dir_path.glob(f"*{suffix}") if p.is_file())


def read_script_file(path: str | Path, encoding: str = "utf-8") -> str:
    """读出一段脚本的完整文本（不去除首尾空白）；路径不存在或为目录时抛出对应异常。"""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"脚本文件不存在：{file_path.absolute()}")
    if file_path.is_dir():
        raise IsADirectoryError(f"脚本路径指向的是目录：{file_path.absolute()}")

    return file_path.read_text(encoding=encoding)
