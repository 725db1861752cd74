"""API routes for converting schedule phrases into RRULE strings."""

# pylint: disable=duplicate-code

from pathlib import Path
from typing import List, Optional, Union

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field, field_validator

from config import config
from converter import convert
from models import RRuleSuccess, RRuleUnsupported
from utils.logging import configure_logger

router = APIRouter()

LOG_FILE = Path(config.LOG_DIR) / "rrule_api.log"
logger = configure_logger(__name__, LOG_FILE)

EXAMPLE_PHRASES = (
    "daily",
    "every monday at 9am",
    "first monday of the month",
    "last day of the month",
    "every 15 minutes between 9am and 5pm",
    "daily at 9:15am and 5:45pm",
    "every monday and wednesday for 5 weeks",
)


class ConvertRequest(BaseModel):  # pylint: disable=too-few-public-methods
    """Input model for schedule conversions."""

    text: str = Field(..., max_length=config.MAX_INPUT_LENGTH)
    locale: Optional[str] = None

    @field_validator("locale")
    @classmethod
    def _normalize_locale(cls, value: Optional[str]) -> Optional[str]:
        return value.strip().lower() if value else None


class ExampleConversion(BaseModel):  # pylint: disable=too-few-public-methods
    """A sample phrase alongside its conversion."""

    text: str
    result: Union[RRuleSuccess, RRuleUnsupported]


def _check_locale(locale: Optional[str]) -> str:
    selected = locale or config.DEFAULT_LOCALE
    if selected not in config.SUPPORTED_LOCALES:
        logger.info("Rejected unsupported locale=%s", selected)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported locale '{selected}'. "
            f"Supported: {', '.join(config.SUPPORTED_LOCALES)}.",
        )
    return selected


@router.post(
    "/rrule",
    response_model=Union[RRuleSuccess, RRuleUnsupported],
    response_model_exclude_none=True,
)
def convert_phrase(data: ConvertRequest):
    """Convert a schedule phrase supplied in the request body."""
    locale = _check_locale(data.locale)
    logger.info("POST /rrule length=%d locale=%s", len(data.text), locale)
    return convert(data.text, locale)


@router.get(
    "/rrule",
    response_model=Union[RRuleSuccess, RRuleUnsupported],
    response_model_exclude_none=True,
)
def convert_query(
    text: str = Query(..., max_length=config.MAX_INPUT_LENGTH),
    locale: Optional[str] = Query(None),
):
    """Convert a schedule phrase supplied as a query parameter."""
    selected = _check_locale(locale.strip().lower() if locale else None)
    logger.info("GET /rrule length=%d locale=%s", len(text), selected)
    return convert(text, selected)


@router.get(
    "/rrule/examples",
    response_model=List[ExampleConversion],
    response_model_exclude_none=True,
)
def list_examples():
    """Return sample phrases with their conversions."""
    logger.info("GET /rrule/examples")
    return [
        ExampleConversion(text=phrase, result=convert(phrase))
        for phrase in EXAMPLE_PHRASES
    ]
