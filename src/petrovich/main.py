#!/usr/bin/env python3
"""
HTTP API for inflecting Russian personal names
"""

from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, model_validator

from petrovich import __version__
from petrovich.config import get_config
from petrovich.contracts import Gender, GrammaticalCase, NameParts
from petrovich.data.rules_loader import load_rules
from petrovich.exceptions import (
    InvalidCase,
    InvalidGender,
    PetrovichException,
    RulesFormatError,
    RulesNotLoaded,
)
from petrovich.layers.inflection import detect_gender as detect_gender_of
from petrovich.services import Petrovich
from petrovich.utils import get_logger, log_error, setup_logging

CONFIG = get_config()

# Setup centralized logging
setup_logging(CONFIG.logging.config_path, CONFIG.logging.level)
logger = get_logger(__name__)

app = FastAPI(
    title="Petrovich",
    description="Inflection of Russian last, first and middle names",
    version=__version__,
)

petrovich_service: Optional[Petrovich] = None

MAX_NAME_LENGTH = CONFIG.api.max_name_length


class NamePayload(BaseModel):
    """Name fields shared by request models"""

    last_name: Optional[str] = Field(None, max_length=MAX_NAME_LENGTH)
    first_name: Optional[str] = Field(None, max_length=MAX_NAME_LENGTH)
    middle_name: Optional[str] = Field(None, max_length=MAX_NAME_LENGTH)


class InflectRequest(NamePayload):
    """Request model for name inflection"""

    case: str
    gender: Optional[str] = None

    @model_validator(mode="after")
    def require_some_name(self):
        if not (self.last_name or self.first_name or self.middle_name):
            raise ValueError("At least one of last_name, first_name, middle_name is required")
        return self


class InflectResponse(BaseModel):
    """Inflected name parts"""

    case: GrammaticalCase
    gender: Gender
    last_name: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None


class DetectGenderRequest(NamePayload):
    """Request model for gender detection"""


class DetectGenderResponse(BaseModel):
    gender: Gender


ERROR_STATUS = {
    InvalidCase: 400,
    InvalidGender: 400,
    RulesNotLoaded: 503,
    RulesFormatError: 500,
}


@app.exception_handler(PetrovichException)
async def petrovich_exception_handler(request: Request, exc: PetrovichException):
    status_code = ERROR_STATUS.get(type(exc), 500)
    logger.warning(f"{request.url.path} failed: {exc.error_code}: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={"error_code": exc.error_code, "message": exc.message, "details": exc.details},
    )


@app.on_event("startup")
async def startup_event():
    """Load the rule table"""
    global petrovich_service

    if not CONFIG.rules.autoload:
        logger.info("Rule autoload disabled, service waits for rules")
        return
    try:
        petrovich_service = Petrovich(load_rules(CONFIG.rules.rules_path))
        logger.info("Petrovich service initialized")
    except RulesFormatError as e:
        log_error(logger, e, "Failed to load rules")
        petrovich_service = None


def _require_service() -> Petrovich:
    if petrovich_service is None:
        raise HTTPException(status_code=503, detail="Rules not loaded")
    return petrovich_service


@app.get("/health")
async def health_check():
    """Service health and rule table status"""
    return {
        "status": "healthy" if petrovich_service is not None else "initializing",
        "rules_loaded": petrovich_service is not None,
        "version": __version__,
    }


@app.post("/inflect", response_model=InflectResponse)
async def inflect_name(request: InflectRequest):
    """
    Inflect the given name parts into one grammatical case

    Raises:
        HTTPException: 503 if rules are not loaded
    """
    service = _require_service()
    parts = NameParts(
        last_name=request.last_name,
        first_name=request.first_name,
        middle_name=request.middle_name,
    )
    result = service.inflect_name_parts(parts, request.case, request.gender)
    # inflect_name_parts validated the case already
    return InflectResponse(
        case=GrammaticalCase(request.case),
        gender=result.gender,
        last_name=result.last_name,
        first_name=result.first_name,
        middle_name=result.middle_name,
    )


@app.post("/detect-gender", response_model=DetectGenderResponse)
async def detect_gender(request: DetectGenderRequest):
    """Detect gender from the middle name"""
    parts = NameParts(
        last_name=request.last_name,
        first_name=request.first_name,
        middle_name=request.middle_name,
    )
    return DetectGenderResponse(gender=detect_gender_of(parts))


def main():
    uvicorn.run(app, host=CONFIG.api.host, port=CONFIG.api.port)


if __name__ == "__main__":
    main()
