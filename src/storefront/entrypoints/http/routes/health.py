from fastapi import APIRouter


router = APIRouter(tags=["Health"])


@router.get("/", summary="API greeting")
def root() -> dict[str, str]:
    return {"message": "Hello API"}


@router.get("/health", summary="Liveness check")
def health() -> dict[str, str]:
    return {"status": "ok"}
