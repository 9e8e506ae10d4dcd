"""Name Declension API Routes

Inflects full names and single name parts, detects gender from a
patronymic, and splits names into parts or initials.
"""
from typing import Literal

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from core.logging import api_logger
from engines.inflection import NameInflector, get_inflector
from languages.russian.maps import CASE_MAP, GENDER_MAP, GENDER_MAP_REV
from languages.types import NamePart

log = api_logger()

router = APIRouter()

CaseName = Literal["nominative", "genitive", "dative", "accusative", "instrumental", "prepositional"]
GenderName = Literal["androgynous", "male", "female"]


# === Response Models ===

class InflectionResponse(BaseModel):
    name: str
    case: CaseName
    gender: GenderName
    result: str


class GenderResponse(BaseModel):
    middlename: str
    gender: GenderName


class DivideResponse(BaseModel):
    lastname: str
    firstname: str | None
    middlename: str | None


class InitialResponse(BaseModel):
    name: str
    initial: str


# === Endpoints ===

@router.get("/inflect", response_model=InflectionResponse)
async def inflect_full_name(
    name: str = Query(..., description="Full name: lastname firstname middlename"),
    case: CaseName = Query("nominative"),
    gender: GenderName = Query("androgynous"),
    inflector: NameInflector = Depends(get_inflector),
):
    """Inflect a full name. Gender is detected from the patronymic when omitted."""
    result = inflector.inflect_full_name(name, CASE_MAP[case], GENDER_MAP[gender])
    log.debug("full_name_inflected", case=case, gender=gender)
    return InflectionResponse(name=name, case=case, gender=gender, result=result)


@router.get("/gender", response_model=GenderResponse)
async def detect_gender(
    middlename: str = Query(..., description="Patronymic"),
    inflector: NameInflector = Depends(get_inflector),
):
    """Detect gender from a patronymic's ending."""
    gender = inflector.detect_gender(middlename)
    return GenderResponse(middlename=middlename, gender=GENDER_MAP_REV[gender])


@router.get("/divide", response_model=DivideResponse)
async def divide_name(name: str = Query(...)):
    """Split a full name into lastname, firstname and middlename."""
    return NameInflector.divide(name).to_dict()


@router.get("/initial", response_model=InitialResponse)
async def initial(name: str = Query(...)):
    """Lastname followed by initials."""
    return InitialResponse(name=name, initial=NameInflector.initial(name))


@router.get("/{part}/inflect", response_model=InflectionResponse)
async def inflect_part(
    part: NamePart,
    name: str = Query(...),
    case: CaseName = Query("nominative"),
    gender: GenderName = Query("androgynous"),
    inflector: NameInflector = Depends(get_inflector),
):
    """Inflect a single lastname, firstname or middlename."""
    result = inflector.inflect_part(part, name, CASE_MAP[case], GENDER_MAP[gender])
    log.debug("name_part_inflected", part=part.value, case=case, gender=gender)
    return InflectionResponse(name=name, case=case, gender=gender, result=result)
