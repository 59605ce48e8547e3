from fastapi import FastAPI, HTTPException
from .errors import InvalidArgument
from .models import RenderRequest, RenderResponse, HealthResponse
from .render import render_rows

app = FastAPI(
    title="csv-line-writer",
    description="Render rows to delimited text with a configurable line format",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/render", response_model=RenderResponse)
def render(request: RenderRequest):
    try:
        return render_rows(request.rows, request.settings)
    except InvalidArgument as e:
        raise HTTPException(status_code=422, detail=str(e))
    except (LookupError, UnicodeError):
        raise HTTPException(status_code=422, detail=f"Cannot encode output as {request.settings.encoding}")
