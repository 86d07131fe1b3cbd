# api/main.py
"""
FastAPI backend for the Portal Method engine - exposes portal_method as REST API.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Any
import logging
import sys
from pathlib import Path

# Add project root to path to import portal_method
sys.path.insert(0, str(Path(__file__).parent.parent))

from portal_method import Structure, ResultGrid, ValidationError, analyze, check_input_limits, default_structure
from portal_method.config import CONFIG
from portal_method.report import round_results, story_summary, results_to_csv, results_to_json


logger = logging.getLogger(__name__)

app = FastAPI(
    title="Portal Method API",
    description="Approximate lateral-load analysis of multi-story rigid frames",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class StructureParams(BaseModel):
    """Frame description, stories listed top to bottom."""
    numStories: Optional[int] = Field(None, description="Story count (defaults to len(storyHeights))")
    storyHeights: List[float] = Field(..., description="Story heights (m)")
    structureType: str = Field("REGULAR", description="REGULAR or IRREGULAR (display only)")
    spansPerStory: List[int] = Field(..., description="Bays per story")
    spanMeasurements: List[List[float]] = Field(..., description="Bay lengths per story (m)")
    lateralLoads: List[float] = Field(..., description="Lateral load per floor (kN)")


class AnalysisRequest(StructureParams):
    """Structure plus analysis options."""
    accumulation: str = Field(CONFIG.default_accumulation, description="adjacent or cumulative")
    enforceLimits: bool = Field(True, description="Apply input-form limits (stories, bays)")
    precision: Optional[int] = Field(None, ge=0, le=10, description="Round results to N decimals")


class AnalysisResult(BaseModel):
    """Complete analysis result."""
    success: bool
    structure: Dict[str, Any]
    results: Dict[str, List[List[float]]]
    summary: List[Dict[str, Any]]
    accumulation: str


# =============================================================================
# Analysis
# =============================================================================

def run_analysis(request: AnalysisRequest) -> tuple[Structure, ResultGrid]:
    """Build the Structure and analyze it. Validation failures become HTTP 422."""
    structure = Structure.from_dict(request.model_dump())
    try:
        if request.enforceLimits:
            check_input_limits(structure)
        grid = analyze(structure, request.accumulation)
    except ValidationError as e:
        logger.info("Rejected structure: %s", e)
        raise HTTPException(status_code=422, detail=e.to_dict())
    except ValueError as e:
        raise HTTPException(status_code=422, detail={"field": "accumulation", "story": None, "message": str(e)})

    logger.debug("Analyzed %d-story frame (accumulation=%s)", structure.story_count, request.accumulation)
    return structure, grid


def summary_records(structure: Structure, grid: ResultGrid) -> List[Dict[str, Any]]:
    """Story summary as JSON-safe records (NaN -> None)."""
    df = story_summary(structure, grid)
    return df.astype(object).where(df.notna(), None).to_dict(orient="records")


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "Portal Method API"}


@app.get("/api/defaults")
async def defaults():
    """Default frame and input limits for the form."""
    return {
        "structure": default_structure().to_dict(),
        "limits": {
            "maxStories": CONFIG.max_stories,
            "maxSpansPerStory": CONFIG.max_spans_per_story,
        },
        "accumulationModes": list(CONFIG.accumulation_modes),
        "structureTypes": list(CONFIG.structure_types),
    }


@app.post("/api/analyze", response_model=AnalysisResult)
async def analyze_structure(request: AnalysisRequest):
    """Run the Portal Method on a frame."""
    structure, grid = run_analysis(request)
    if request.precision is not None:
        grid = round_results(grid, request.precision)

    return AnalysisResult(
        success=True,
        structure=structure.to_dict(),
        results=grid.to_dict(),
        summary=summary_records(structure, grid),
        accumulation=request.accumulation,
    )


@app.post("/api/export/csv")
async def export_csv(request: AnalysisRequest):
    """Export member results as CSV."""
    structure, grid = run_analysis(request)
    precision = CONFIG.display_precision if request.precision is None else request.precision

    return StreamingResponse(
        iter([results_to_csv(structure, grid, precision)]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=portal_results.csv"}
    )


@app.post("/api/export/json")
async def export_json(request: AnalysisRequest):
    """Export structure and results as JSON."""
    structure, grid = run_analysis(request)
    precision = CONFIG.display_precision if request.precision is None else request.precision

    return StreamingResponse(
        iter([results_to_json(structure, grid, precision)]),
        media_type="application/json",
        headers={"Content-Disposition": "attachment; filename=portal_results.json"}
    )


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host="0.0.0.0", port=8000)
