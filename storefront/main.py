from __future__ import annotations

from fastapi import FastAPI

from storefront.api.routers.storefront import router as storefront_router


app = FastAPI(title="Storefront")
app.include_router(storefront_router)


@app.get("/healthz")
def healthz():
    return {"status": "ok"}
