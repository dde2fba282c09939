"""
cozo_client.db.export
---------------------

批量执行目录下的查询脚本，并将每个脚本的结果保存为 {filename}_res.csv。

单个脚本失败（接口返回非 2xx、网络异常、结果无法转换等）只记入失败列表，
不中断后续脚本。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from cozo_client.db.text_query_client import QueryClient
from cozo_client.logger import get_logger
from cozo_client.utils.script_loader import DEFAULT_SCRIPT_SUFFIX, list_script_files, read_script_file

_logger = get_logger(__name__)


def export_script_results(
    client: QueryClient,
    script_dir: str | Path,
    output_dir: Optional[str | Path] = None,
    suffix: str = DEFAULT_SCRIPT_SUFFIX,
) -> Dict[str, Any]:
    """
    执行 script_dir 下的全部脚本文件并导出 CSV。

    输入：
        client: 已构造好的 QueryClient；
        script_dir: 脚本目录；
        output_dir: CSV 输出目录，默认与 script_dir 相同，不存在时自动创建；
        suffix: 脚本文件后缀，默认 ".cozo"。
    输出：
        dict：{"total": 脚本数, "success": [成功文件名], "failed": [失败文件名]}。
    异常：
        script_dir 不存在或不是目录时直接抛出。
    """
    script_dir = Path(script_dir)
    out_dir = Path(output_dir) if output_dir is not None else script_dir

    script_files = list_script_files(script_dir, suffix=suffix)
    summary: Dict[str, Any] = {"total": len(script_files), "success": [], "failed": []}
    if not script_files:
        _logger.info("目录中未找到任何 %s 文件：%s", suffix, script_dir)
        return summary

    out_dir.mkdir(parents=True, exist_ok=True)
    total = len(script_files)
    _logger.info("开始执行脚本目录：%s，待运行文件数：%d", script_dir, total)

    success_files: List[str] = summary["success"]
    failed_files: List[str] = summary["failed"]

    for idx, script_path in enumerate(script_files, start=1):
        _logger.info("执行第 %d/%d 个：%s", idx, total, script_path.name)
        try:
            script = read_script_file(script_path)
            df = client.run_df(script)
            if df is None:
                _logger.warning("第 %d 个：%s 未返回结果", idx, script_path.name)
                failed_files.append(script_path.name)
                continue
            out_path = out_dir / f"{script_path.stem}_res.csv"
            df.to_csv(out_path, index=False)
            success_files.append(script_path.name)
        except Exception as exc:
            _logger.error("第 %d 个：%s 执行失败，错误：%s", idx, script_path.name, exc)
            failed_files.append(script_path.name)

    _logger.info(
        "共 %d 个脚本文件，成功 %d 个，失败 %d 个。",
        total,
        len(success_files),
        len(failed_files),
    )
    return summary
