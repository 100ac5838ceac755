# eshop_product/auth_service/main.py
from fastapi import FastAPI, Header, HTTPException

from eshop_product.utils.settings import AUTH_MOCK_TOKENS

app = FastAPI(title="Auth Service (dev mock)")


@app.get("/v1/validate")
def validate(x_access_token: str = Header("", alias="X-Access-Token")):
    if x_access_token not in AUTH_MOCK_TOKENS:
        raise HTTPException(status_code=401, detail="Invalid access token")
    return {"ok": True}
