import logging
import os
import shutil
import tempfile

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from hl2demo import DemoDecodeError, DemoParser

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

CORS_ORIGINS = ["http://localhost:5173"]  # React dev server

app = FastAPI(title="HL2 Demo API")

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/analyze-demo")
async def analyze_demo(demo: UploadFile = File(...)):
    logger.info(f"Received demo file: {demo.filename}")

    # Save uploaded file
    fd, temp_demo_path = tempfile.mkstemp(suffix=".dem")
    with os.fdopen(fd, "wb") as buffer:
        shutil.copyfileobj(demo.file, buffer)

    try:
        analysis = DemoParser(temp_demo_path).analyze()
        return {
            "success": True,
            "data": analysis
        }
    except DemoDecodeError as e:
        logger.warning(f"Rejected demo {demo.filename}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    finally:
        # Cleanup
        os.remove(temp_demo_path)


@app.get("/")
async def root():
    return {"message": "HL2 Demo API is running"}
