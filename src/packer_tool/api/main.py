from fastapi import FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel
import logging
import sys
from pathlib import Path

# Add src to path for internal imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from packer_tool.engine import PackingError
from packer_tool.engine.constraints import validate_packaging_constraints
from packer_tool.engine.extractor import extract_package
from packer_tool.engine.report import results_frame
from packer_tool.api.state import engine

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Packer API",
    description="Backend API for packing items into weight-limited packages",
    version="1.0.0"
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class PackRequest(BaseModel):
    text: str


class LineRequest(BaseModel):
    line: str


@app.get("/")
async def root():
    return {"status": "online", "message": "Packer API Active"}


@app.post("/pack")
def pack_text(req: PackRequest):
    try:
        results = engine.process_text(req.text)
    except PackingError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception("Packing failed")
        raise HTTPException(status_code=500, detail=str(e))
    return {
        "result": "\n".join(r.token for r in results),
        "lines": len(results),
    }


@app.post("/line")
def pack_line(req: LineRequest):
    try:
        result = engine.process(req.line)
    except PackingError as e:
        detail = {"message": str(e)}
        if e.validation is not None:
            detail["validation"] = jsonable_encoder(e.validation)
        raise HTTPException(status_code=422, detail=detail)
    # Use jsonable_encoder to handle the nested dataclasses
    return jsonable_encoder(result)


@app.post("/validate")
def validate_line(req: LineRequest):
    try:
        package = extract_package(req.line)
    except PackingError as e:
        raise HTTPException(status_code=422, detail=str(e))
    validation = validate_packaging_constraints(package, engine.constraints)
    return {
        **jsonable_encoder(validation),
        "failed": validation.failed_constraints(),
    }


@app.post("/report.csv")
def report_csv(req: PackRequest):
    try:
        results = engine.process_text(req.text)
    except PackingError as e:
        raise HTTPException(status_code=422, detail=str(e))
    df = results_frame(results)
    return Response(content=df.to_csv(index=False), media_type="text/csv")


@app.get("/system/status")
async def get_status():
    return {
        "engine_active": True,
        "constraints": jsonable_encoder(engine.constraints),
        "workers": engine.workers,
    }
