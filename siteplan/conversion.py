"""DWG -> DXF conversion through the CloudConvert job API."""

from __future__ import annotations

import logging
from pathlib import Path

import cloudconvert

from .errors import ConversionError
from .models import ConversionJob

logger = logging.getLogger(__name__)

IMPORT_TASK = "import-upload"
CONVERT_TASK = "convert"
EXPORT_TASK = "export-url"

_configured = False


def configure(api_key: str | None, sandbox: bool = False) -> None:
    """Configure the CloudConvert client; must run before convert_dwg_to_dxf."""
    global _configured
    if not api_key:
        logger.warning("CLOUDCONVERT_API_KEY is not set; DWG conversion will fail")
        _configured = False
        return
    cloudconvert.configure(api_key=api_key, sandbox=sandbox)
    _configured = True


def build_job_payload() -> dict:
    """Three-task job: upload -> convert dwg to dxf -> export as URL.

    No engine is pinned; CloudConvert picks one for the dwg input.
    """
    return {
        "tasks": {
            IMPORT_TASK: {"operation": "import/upload"},
            CONVERT_TASK: {
                "operation": "convert",
                "input": IMPORT_TASK,
                "input_format": "dwg",
                "output_format": "dxf",
            },
            EXPORT_TASK: {"operation": "export/url", "input": CONVERT_TASK},
        }
    }


def dxf_output_path(input_path: Path, output_dir: Path | None = None) -> Path:
    """``plan.DWG`` -> ``plan.dxf``, in output_dir or next to the input."""
    if input_path.suffix.lower() == ".dwg":
        name = input_path.with_suffix(".dxf").name
    else:
        name = input_path.name + ".dxf"
    return (output_dir or input_path.parent) / name


def convert_dwg_to_dxf(input_path: str | Path, output_dir: str | Path | None = None) -> Path:
    """Upload a DWG, wait for the conversion job and download the DXF.

    Returns the path of the downloaded DXF. Every failure is raised as
    ConversionError with the underlying cause chained.
    """
    input_path = Path(input_path)
    output_path = dxf_output_path(input_path, Path(output_dir) if output_dir else None)

    if not _configured:
        raise ConversionError("Conversion error: CLOUDCONVERT_API_KEY is not set")

    try:
        job = cloudconvert.Job.create(payload=build_job_payload())
        upload_task = _find_task(job, IMPORT_TASK)
        logger.info("CloudConvert job %s created for %s", job.get("id"), input_path.name)

        cloudconvert.Task.upload(file_name=str(input_path), task=upload_task)

        completed = cloudconvert.Job.wait(id=job["id"])
        result = _export_result(completed)

        cloudconvert.download(filename=str(output_path), url=result.download_url)
    except ConversionError:
        raise
    except Exception as exc:
        logger.exception("DWG conversion failed for %s", input_path.name)
        raise ConversionError(f"Conversion error: {exc}") from exc

    logger.info("CloudConvert job %s finished: %s", result.job_id, output_path.name)
    return output_path


def _find_task(job: dict, name: str) -> dict:
    for task in job.get("tasks", []):
        if task.get("name") == name:
            return task
    raise ConversionError(f"Conversion error: job has no '{name}' task")


def _export_result(job: dict) -> ConversionJob:
    """Pull the download URL out of a finished job, or raise on failure."""
    if job.get("status") == "error":
        failed = [
            f"{t.get('name')}: {t.get('message') or t.get('code') or 'failed'}"
            for t in job.get("tasks", [])
            if t.get("status") == "error"
        ]
        raise ConversionError(
            "Conversion error: " + ("; ".join(failed) or "job failed")
        )

    export_task = _find_task(job, EXPORT_TASK)
    files = (export_task.get("result") or {}).get("files") or []
    if not files:
        raise ConversionError("Conversion error: export task returned no files")

    return ConversionJob(
        job_id=str(job.get("id", "")),
        status=str(job.get("status", "")),
        download_url=files[0]["url"],
        filename=files[0].get("filename", ""),
    )
