from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict

from income_tax.config import get_settings
from income_tax.errors import IncomeTaxError
from income_tax.germany import IncomeTaxType, supported_year_labels
from income_tax.lifespan import build_application_lifespan
from income_tax.schema import IncomeTaxSpec

logger = logging.getLogger("income_tax")


async def _announce_default_year(_: FastAPI) -> None:
    settings = get_settings()
    logger.info("Income tax API ready; default_year=%s build=%s", settings.default_year, settings.build_version)


app = FastAPI(
    title="Income Tax",
    description="German income tax (§ 32a EStG) and tax refunds for supported assessment years.",
    lifespan=build_application_lifespan("api", startup_hook=_announce_default_year),
)


class CalculateRequest(BaseModel):
    tax: IncomeTaxSpec | None = None
    income: float

    model_config = ConfigDict(extra="forbid")


class CalculateResponse(BaseModel):
    year: int
    income: float
    tax: float


class RefundRequest(BaseModel):
    tax: IncomeTaxSpec | None = None
    income_before: float
    income_after: float

    model_config = ConfigDict(extra="forbid")


class RefundResponse(BaseModel):
    year: int
    income_before: float
    income_after: float
    refund: float


def _resolve_tax(spec: IncomeTaxSpec | None) -> IncomeTaxType:
    if spec is None:
        spec = IncomeTaxSpec(year=get_settings().default_year)
    return spec.build()


def _reject(exc: IncomeTaxError) -> HTTPException:
    logger.info("Rejected income %r: %s", exc.income, exc.kind)
    return HTTPException(status_code=422, detail={"error": exc.kind, "message": str(exc)})


@app.get("/health")
def health():
    settings = getattr(app.state, "settings", get_settings())
    return {
        "status": "ok",
        "default_year": settings.default_year,
        "supported_years": supported_year_labels(),
        "build": {
            "version": settings.build_version,
            "sha": settings.build_sha,
        },
    }


@app.get("/tax/years")
def tax_years():
    return {"years": supported_year_labels()}


@app.post("/tax/calculate", response_model=CalculateResponse)
def calculate(req: CalculateRequest):
    tax = _resolve_tax(req.tax)
    try:
        amount = tax.calculate(req.income)
    except IncomeTaxError as exc:
        raise _reject(exc) from exc
    return CalculateResponse(year=tax.year(), income=req.income, tax=amount)


@app.post("/tax/refund", response_model=RefundResponse)
def refund(req: RefundRequest):
    tax = _resolve_tax(req.tax)
    try:
        amount = tax.tax_refund(req.income_before, req.income_after)
    except IncomeTaxError as exc:
        raise _reject(exc) from exc
    return RefundResponse(
        year=tax.year(),
        income_before=req.income_before,
        income_after=req.income_after,
        refund=amount,
    )
