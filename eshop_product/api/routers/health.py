from fastapi import APIRouter

router = APIRouter(tags=["health"])


def health():
    return {"status": "healthy"}


router.add_api_route("/health", health, methods=["GET"])
