"""
Estimates Endpoints

Visitors submit their own forecasts; the latest submissions are listed on the
dashboard. Submission and deletion are public.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from store import EstimatesStore
from .deps import get_estimates_store


estimates_router = APIRouter()


class EstimateSubmission(BaseModel):
    name: Optional[str] = None
    estimates: Optional[Any] = None


@estimates_router.get("/api/estimates")
async def list_estimates(store: EstimatesStore = Depends(get_estimates_store)):
    return JSONResponse({"success": True, "data": store.list()})


@estimates_router.post("/api/estimates/submit")
async def submit_estimate(
    body: EstimateSubmission,
    store: EstimatesStore = Depends(get_estimates_store),
):
    if not body.name or not body.estimates:
        raise HTTPException(status_code=400, detail="Name and estimates are required")

    entry = store.submit(body.name, body.estimates)
    return JSONResponse({
        "success": True,
        "message": "Estimate submitted successfully",
        "data": entry,
    })


@estimates_router.delete("/api/estimates/{estimate_id}")
async def delete_estimate(
    estimate_id: int,
    store: EstimatesStore = Depends(get_estimates_store),
):
    if not store.delete(estimate_id):
        return JSONResponse({"success": False, "message": "Estimate not found"})
    return JSONResponse({"success": True, "message": "Estimate deleted successfully"})
