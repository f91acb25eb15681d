import logging
import tempfile
from pathlib import Path

from fastapi import FastAPI, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from siteplan import SetbackRule, validate_dwg_file, validate_dxf
from siteplan.config import load_settings
from siteplan.conversion import configure as configure_conversion
from siteplan.errors import SiteplanError

settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("siteplan.api")

configure_conversion(settings.cloudconvert_api_key, settings.cloudconvert_sandbox)

app = FastAPI(title="Setback Checker")
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def _rule_for_request(min_distance: float | None) -> SetbackRule:
    """Default rule, or a per-request override of the minimum distance."""
    if min_distance is None:
        return settings.setback_rule
    return SetbackRule(min_distance=min_distance, unit=settings.setback_rule.unit)


def _bad_request(detail: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Invalid request", "detail": detail})


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return templates.TemplateResponse(
        request, "index.html", {"rule": settings.setback_rule}
    )


@app.get("/api/rules")
def rules():
    """Return the active setback rule."""
    return settings.setback_rule.model_dump()


@app.post("/upload")
def upload(
    dwgFile: UploadFile = File(...),
    min_distance: float | None = Form(None),
):
    """Accept a DWG upload, convert it to DXF and check the setback rule."""
    if not dwgFile.filename or not dwgFile.filename.lower().endswith(".dwg"):
        return _bad_request("Please upload a .dwg file.")
    try:
        rule = _rule_for_request(min_distance)
    except ValidationError as e:
        return _bad_request(str(e))

    try:
        with tempfile.TemporaryDirectory(prefix="siteplan-") as workdir:
            dwg_path = Path(workdir) / Path(dwgFile.filename).name
            dwg_path.write_bytes(dwgFile.file.read())
            report = validate_dwg_file(dwg_path, dwgFile.filename, rule)
        return report.model_dump(by_alias=True)
    except SiteplanError as e:
        logger.error("Upload %s failed: %s", dwgFile.filename, e)
        return JSONResponse(status_code=500, content={"error": str(e)})


@app.post("/api/validate-dxf")
def validate_dxf_upload(
    file: UploadFile = File(...),
    min_distance: float | None = Form(None),
):
    """Check the setback rule on a DXF upload, skipping conversion."""
    if not file.filename or not file.filename.lower().endswith(".dxf"):
        return _bad_request("Please upload a .dxf file.")
    try:
        rule = _rule_for_request(min_distance)
    except ValidationError as e:
        return _bad_request(str(e))

    try:
        report = validate_dxf(file.file.read(), file.filename, rule)
        return report.model_dump(by_alias=True)
    except SiteplanError as e:
        logger.error("DXF validation of %s failed: %s", file.filename, e)
        return JSONResponse(status_code=500, content={"error": str(e)})
