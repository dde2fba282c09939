"""
cozo_client.logger
------------------

统一日志入口：各模块通过 get_logger(__name__) 获取 logger。

- 所有 logger 均挂在 "cozo_client" 根 logger 之下；
- 根 logger 只安装一次 stderr 处理器，并关闭向上传播，
  宿主程序即使配置了 root logger，同一条诊断信息也只输出一次。
"""

from __future__ import annotations

import logging
import sys

_ROOT_NAME = "cozo_client"
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class _StderrHandler(logging.StreamHandler):
    """每次输出时取当前的 sys.stderr（被重定向后仍然有效）。"""

    def __init__(self) -> None:
        super().__init__()
        self.setFormatter(logging.Formatter(_LOG_FORMAT))

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def _configure_root() -> logging.Logger:
    root = logging.getLogger(_ROOT_NAME)
    if not any(isinstance(h, _StderrHandler) for h in root.handlers):
        root.addHandler(_StderrHandler())
        root.setLevel(logging.INFO)
        root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """
    获取 cozo_client 下的子 logger。

    输入：
        name: 一般传入 __name__；不以 "cozo_client" 开头时自动挂到其下。
    输出：
        logging.Logger 实例。
    """
    _configure_root()
    if name == _ROOT_NAME or name.startswith(_ROOT_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_NAME}.{name}")
