from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from mathcat.generator import GeneratorExhaustedError
from mathcat.worksheet_uri import (
    decode_worksheet_from_uri,
    encode_worksheet_to_uri,
    generate_shareable_url,
)
from mathcat.worksheets import build_generated_worksheet, generate_example_csv, parse_csv_to_worksheet
from schemas.worksheets import (
    GeneratedWorksheetResponse,
    GenerateWorksheetRequest,
    ImportCsvRequest,
    ShareRequest,
    ShareResponse,
    Worksheet,
)

router = APIRouter(prefix="/worksheets", tags=["worksheets"])


@router.post("/import-csv", response_model=Worksheet)
def import_csv(req: ImportCsvRequest):
    ws = parse_csv_to_worksheet(req.csv, req.title, req.description)
    if ws is None:
        raise HTTPException(status_code=400, detail="No valid problems found in CSV")
    return ws


@router.get("/example-csv", response_class=PlainTextResponse)
def example_csv():
    return PlainTextResponse(
        generate_example_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="mathcat-worksheet-example.csv"'},
    )


@router.post("/generate", response_model=GeneratedWorksheetResponse)
def generate_worksheet(req: GenerateWorksheetRequest):
    try:
        ws = build_generated_worksheet(
            req.batches,
            allow_zeros=req.allow_zeros,
            settings=req.settings,
            section_settings=req.section_settings,
        )
    except GeneratorExhaustedError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"worksheet": ws, "encoded": encode_worksheet_to_uri(ws)}


@router.post("/share", response_model=ShareResponse)
def share(req: ShareRequest):
    return {
        "encoded": encode_worksheet_to_uri(req.worksheet),
        "url": generate_shareable_url(req.worksheet, req.base_url),
    }


@router.get("/shared/{encoded}", response_model=Worksheet)
def shared(encoded: str):
    ws = decode_worksheet_from_uri(encoded)
    if ws is None:
        raise HTTPException(status_code=404, detail="worksheet link is invalid")
    return ws
