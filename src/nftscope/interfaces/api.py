"""
FastAPI REST API Interface
Programmatic access to NFTScope for viewers and automation
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field

from nftscope import __version__
from nftscope.core.config import ParserConfig
from nftscope.core.errors import OutputParseError
from nftscope.core.models import ContentType
from nftscope.core.output_parser import OutputParser
from nftscope.utils.report_generator import ReportGenerator


logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="NFTScope API",
    description="Decode tokenURI / render output into renderable media",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

parser = OutputParser(ParserConfig())
report_gen = ReportGenerator()


class FunctionOutputRequest(BaseModel):
    output: str = Field(..., description="Raw contract function output")
    gas: int = Field(0, ge=0, description="Gas value to carry into the result")
    trim_size: Optional[int] = Field(None, gt=0, description="Display length for JSON media attributes")


class HarnessOutputRequest(BaseModel):
    output: str = Field(..., description="Test harness log with <NFT_GAS>/<NFT_OUTPUT> markers")


@app.exception_handler(OutputParseError)
async def output_parse_error_handler(request: Request, exc: OutputParseError):
    logger.info("Rejected %s: %s", request.url.path, type(exc).__name__)
    return JSONResponse(status_code=422, content=exc.to_dict())


@app.get("/")
async def root():
    """
    API root endpoint - service info
    """
    return {
        "service": "NFTScope API",
        "version": __version__,
        "status": "operational",
        "endpoints": {
            "parse": "/parse",
            "parse_test_output": "/parse-test-output",
            "render": "/render",
            "content_types": "/content-types",
            "health": "/health",
            "docs": "/docs"
        }
    }


@app.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring
    """
    return {
        "status": "healthy",
        "service": "nftscope-api",
        "version": __version__
    }


@app.get("/content-types")
async def list_content_types():
    """
    List content types a parse result may contain
    """
    return {
        "content_types": [t.name for t in ContentType if t is not ContentType.UNKNOWN]
    }


@app.post("/parse")
async def parse_function_output(request: FunctionOutputRequest):
    """
    Parse the output of a render function or tokenURI call

    Example:
    ```bash
    curl -X POST "http://localhost:8000/parse" \
         -H "Content-Type: application/json" \
         -d '{"output": "data:application/json,{\\"image\\":\\"<svg></svg>\\"}"}'
    ```
    """
    result = parser.parse_contract_function_output(request.output, request.gas, request.trim_size)
    return result.to_dict()


@app.post("/parse-test-output")
async def parse_test_output(request: HarnessOutputRequest):
    """
    Parse a test harness log
    """
    result = parser.parse_test_output(request.output)
    return result.to_dict()


@app.post("/render", response_class=HTMLResponse)
async def render_preview(request: FunctionOutputRequest):
    """
    Parse function output and return an HTML preview page
    """
    result = parser.parse_contract_function_output(request.output, request.gas, request.trim_size)
    return HTMLResponse(content=report_gen.generate_html(result, "NFTScope Preview"))


# Run server with: uvicorn nftscope.interfaces.api:app --reload --host 0.0.0.0 --port 8000
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
