from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pixcheckout.config import settings
from pixcheckout.api import pix
import logging


# Configurar logs
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)

# Criar aplicação FastAPI
app = FastAPI(
    title="PIX Checkout API",
    description="Geração e consulta de cobranças PIX via GhostsPay",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    redirect_slashes=False
)

# Configurar CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ====================================
# ROTAS
# ====================================

app.include_router(
    pix.router,
    prefix="/api/v1/pix",
    tags=["PIX"]
)

# ====================================
# HEALTH CHECK
# ====================================

@app.get("/")
async def health_check():
    """Health check"""
    return {"status": "ok", "service": "pix-checkout-api"}

# ====================================
# EVENTOS
# ====================================

@app.on_event("startup")
async def startup_event():
    """
    Executado quando a aplicação inicia
    """
    logger.info("🚀 Iniciando PIX Checkout API")
    logger.info(f"📦 Ambiente: {settings.ENVIRONMENT}")
    logger.info(f"🔗 GhostsPay: {settings.GHOSTSPAY_PURCHASE_URL} (auth: {settings.GHOSTSPAY_AUTH_SCHEME})")
    logger.info(f"🌐 CORS Origins: {settings.cors_origins_list}")
    if not settings.GHOSTSPAY_SECRET_KEY:
        logger.warning("GHOSTSPAY_SECRET_KEY não configurado - rotas PIX vão responder 503")


@app.on_event("shutdown")
async def shutdown_event():
    """
    Executado quando a aplicação é desligada
    """
    logger.info("🔴 Desligando PIX Checkout API")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("pixcheckout.main:app", host=settings.HOST, port=settings.PORT)
