"""
Recommendation API Routes

Exposes the career scoring engine via REST API.
Main endpoint: POST /recommendations
"""

import logging
from typing import Optional, Dict, Any
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from db import get_db
from .logic.clusters import CLUSTERS, AFFINITY_MAPS, CONSTRAINT_OPTIONS, OPTION_ALIASES, CONSTRAINT_ALIASES
from .logic.constants import ENGINE_VERSION
from .logic.contracts import StudentProfile, RecommendationResult
from .logic.encodings import table_snapshot
from .logic.errors import UnrecognizedAnswerValue
from .logic.explanations import build_explanations
from .logic.runner import run_recommendations
from .ai.explainer import explainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class RecommendationRequest(BaseModel):
    """Request body for recommendations endpoint."""
    student_profile: Dict[str, Any] = Field(
        ...,
        description="Student questionnaire answers",
        examples=[{
            "grade": 11,
            "zipCode": "30301",
            "workStyle": ["Helping people directly"],
            "traits": ["Compassionate and caring"],
            "educationWillingness": "2–4 years (college or technical school)",
            "incomeImportance": "Somewhat important",
            "stabilityImportance": "Very important",
            "helpingImportance": "Very important",
            "decisionPressure": "Want to narrow this year",
            "riskTolerance": "Prefer stability",
            "supportLevel": "Some support available",
            "careerConfidence": "Somewhat confident",
        }]
    )
    explain: bool = Field(
        default=False,
        description="Include AI-generated explanation"
    )


class ExplanationRequest(BaseModel):
    """Request body for the text explanations endpoint."""
    recommendations: Optional[Dict[str, Any]] = Field(
        default=None,
        description="A result previously returned by POST /recommendations"
    )
    profile: Optional[Dict[str, Any]] = None


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("", summary="Get career recommendations")
@router.post("/", summary="Get career recommendations", include_in_schema=False)
def get_recommendations(
    request: RecommendationRequest,
    db_session=Depends(get_db)
):
    """
    Generate personalized career recommendations from questionnaire answers.

    **Request Body:**
    - `student_profile`: Student's questionnaire answers (camelCase keys)
    - `explain`: Include AI-generated explanation (default: False)

    **Response:**
    - Top clusters with reasoning
    - Careers categorized as Best Fit/Good Fit/Stretch Option
    - Four-year plan skeleton and comparison questions
    - AI explanation (if requested and available)
    """
    try:
        # Parse student profile
        try:
            profile = StudentProfile(**request.student_profile)
        except ValidationError as e:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid student profile: {str(e)}"
            )

        with db_session as db:
            try:
                result = run_recommendations(db, profile)
            except UnrecognizedAnswerValue as e:
                raise HTTPException(status_code=422, detail=e.to_dict())

        data = result.to_response()
        response_data: Dict[str, Any] = {
            "success": True,
            "data": data,
            "message": "Career recommendations generated successfully",
        }

        # AI Explanation Layer
        if request.explain:
            explanation = explainer.get_explanation(
                student_profile=request.student_profile,
                engine_output=data
            )
            if explanation:
                response_data["ai_explanation"] = explanation

        return response_data

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("❌ Error generating recommendations")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": "Failed to generate career recommendations",
                "message": str(e),
            }
        )


@router.post("/explanations", summary="Explain a recommendation result in plain text")
def get_explanations(request: ExplanationRequest):
    """Generate deterministic text explanations from a structured result."""
    if not request.recommendations:
        raise HTTPException(status_code=400, detail="Recommendations data is required")

    try:
        result = RecommendationResult(**request.recommendations)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid recommendations data: {str(e)}")

    return {
        "success": True,
        "data": build_explanations(result, request.profile),
        "message": "Explanations generated successfully",
    }


@router.get("/clusters", summary="List the career clusters")
def list_clusters():
    """The ten fixed career clusters with their value profiles."""
    return {
        "success": True,
        "data": [cluster.model_dump(mode="json") for cluster in CLUSTERS],
    }


@router.get("/options", summary="List accepted questionnaire answers")
def list_options():
    """Every accepted answer: single-choice tables, multi-select options and short tags."""
    options = {category: list(weights) for category, weights in AFFINITY_MAPS.items()}
    options["constraints"] = list(CONSTRAINT_OPTIONS)

    aliases = {category: dict(table) for category, table in OPTION_ALIASES.items()}
    aliases["constraints"] = dict(CONSTRAINT_ALIASES)

    return {
        "success": True,
        "data": {
            "single_choice": table_snapshot(),
            "multi_select": options,
            "aliases": aliases,
        },
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Recommendation engine health check")
def health_check():
    """Check if recommendation engine is operational."""
    return {"status": "ok", "engine": "career-recommendation", "version": ENGINE_VERSION}
