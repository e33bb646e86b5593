# routers/health.py
from fastapi import APIRouter

from patterns import ALL_PATTERNS

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health():
    return {"ok": True, "patterns": len(ALL_PATTERNS)}
