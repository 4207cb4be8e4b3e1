"""Modulus query service (FastAPI).

Endpoints:
- GET  /health        – liveness check
- GET  /modulus/{m}   – primality and primitive root of m
- POST /eval          – one arithmetic operation under modulus m

Moduli are fixed-width: 0 < m < 2**64.  Primitive roots are only searched
for primes up to SERVICE_MAX_ROOT_MODULUS.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from modint import numtheory
from modint.config import FIXED_WIDTH_BITS, KNOWN_PRIMITIVE_ROOTS, SERVICE_MAX_ROOT_MODULUS
from modint.errors import ModIntError
from modint.modint import ModInt
from modint.modulus import DynamicModulus

logger = logging.getLogger(__name__)

OPS = ("add", "sub", "mul", "div", "neg", "inv", "pow")

# ------ request / response models ------


class ModulusInfo(BaseModel):
    modulus: int
    is_prime: bool
    primitive_root: Optional[int] = None


class EvalRequest(BaseModel):
    modulus: int = Field(gt=0, lt=1 << FIXED_WIDTH_BITS)
    op: str
    x: int
    y: Optional[int] = None
    exponent: Optional[int] = Field(default=None, ge=0)


class EvalResponse(BaseModel):
    modulus: int
    op: str
    result: int


def _evaluate(req: EvalRequest) -> int:
    modulus = DynamicModulus(req.modulus)
    x = ModInt(req.x, modulus)
    if req.op == "neg":
        return (-x).value
    if req.op == "inv":
        return x.inv().value
    if req.op == "pow":
        if req.exponent is None:
            raise HTTPException(400, "Operation 'pow' needs an exponent")
        return x.pow(req.exponent).value

    if req.y is None:
        raise HTTPException(400, f"Operation '{req.op}' needs a second operand y")
    y = ModInt(req.y, modulus)
    if req.op == "add":
        return (x + y).value
    if req.op == "sub":
        return (x - y).value
    if req.op == "mul":
        return (x * y).value
    return (x / y).value


def create_app() -> FastAPI:
    app = FastAPI(title="modint query service")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/modulus/{m}", response_model=ModulusInfo)
    def modulus_info(m: int):
        if not 0 < m < 1 << FIXED_WIDTH_BITS:
            raise HTTPException(400, f"Modulus must satisfy 0 < M < 2**{FIXED_WIDTH_BITS}, got {m}")
        prime = numtheory.is_prime(m)
        root = None
        if prime:
            if m > SERVICE_MAX_ROOT_MODULUS and m not in KNOWN_PRIMITIVE_ROOTS:
                raise HTTPException(
                    422,
                    f"Primitive root search is limited to moduli <= {SERVICE_MAX_ROOT_MODULUS}",
                )
            root = numtheory.primitive_root(m)
        logger.debug("modulus %d: prime=%s root=%s", m, prime, root)
        return ModulusInfo(modulus=m, is_prime=prime, primitive_root=root)

    @app.post("/eval", response_model=EvalResponse)
    async def evaluate(req: EvalRequest):
        if req.op not in OPS:
            raise HTTPException(400, f"Unknown op '{req.op}', expected one of {', '.join(OPS)}")
        try:
            result = _evaluate(req)
        except (ModIntError, ZeroDivisionError, ValueError) as exc:
            logger.debug("eval %s under %d failed: %s", req.op, req.modulus, exc)
            raise HTTPException(400, str(exc))
        return EvalResponse(modulus=req.modulus, op=req.op, result=result)

    return app


app = create_app()
