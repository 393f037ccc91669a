"""FastAPI + Tailwind interface for checking DEP-12 metadata.

Run with:
    uvicorn dep12.web:app --reload
"""
from __future__ import annotations

from html import escape
import logging
from typing import Any, List, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from .config import load_settings
from .document import Dep12Document
from .models import ConstructionError, ValidationWarning
from .report import render_report
from .validation import Dep12Validator

logger = logging.getLogger(__name__)

app = FastAPI(title="DEP-12 Checker", description="Validate debian/upstream/metadata from the browser")


class ValidateRequest(BaseModel):
    text: str = Field(..., description="Contents of a debian/upstream/metadata file")


class WarningOut(BaseModel):
    message: str
    field: str
    rendered: str
    value: Optional[Any] = None
    key: Optional[int] = None
    suggestion: Optional[str] = None


class ValidateResponse(BaseModel):
    valid: bool
    warnings: List[WarningOut]


def _check_text(text: str) -> List[ValidationWarning]:
    settings = load_settings()
    try:
        document = Dep12Document.from_yaml(text, settings.yaml_config())
    except ConstructionError as exc:
        logger.info("Rejected submitted metadata: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return Dep12Validator().validate(document)


def _warning_out(warning: ValidationWarning) -> WarningOut:
    return WarningOut(
        message=warning.message,
        field=str(warning.field),
        rendered=warning.render(),
        value=warning.value,
        key=warning.key,
        suggestion=warning.suggestion,
    )


def _layout(content: str) -> str:
    """Wrap provided content in a Tailwind-powered HTML page."""

    return f"""
    <!doctype html>
    <html lang=\"en\" class=\"h-full bg-gray-50\">
    <head>
        <meta charset=\"utf-8\" />
        <title>DEP-12 Checker</title>
        <link href=\"https://cdn.jsdelivr.net/npm/tailwindcss@3.4.4/dist/tailwind.min.css\" rel=\"stylesheet\" />
    </head>
    <body class=\"min-h-full py-10\">
        <div class=\"max-w-5xl mx-auto px-4\">
            <div class=\"bg-white shadow rounded-lg p-6\">
                <h1 class=\"text-3xl font-semibold text-gray-900\">DEP-12 Checker</h1>
                <p class=\"text-gray-600 mt-2\">Paste the contents of debian/upstream/metadata to see which fields need attention.</p>
                {content}
            </div>
        </div>
    </body>
    </html>
    """


def _form_page(text: str = "", report: str | None = None) -> str:
    """Render the landing page with optional report output."""

    text_form = f"""
    <form action=\"/validate\" method=\"post\" class=\"bg-gray-50 border border-gray-200 rounded-lg p-4 mt-6\">
        <label class=\"block text-sm font-medium text-gray-700 mb-2\" for=\"text\">Upstream metadata (YAML)</label>
        <textarea name=\"text\" required placeholder=\"Bug-Database: https://...\" class=\"w-full h-44 border border-gray-300 rounded-md p-3 text-sm font-mono\">{escape(text)}</textarea>
        <button type=\"submit\" class=\"mt-4 inline-flex items-center px-4 py-2 bg-indigo-600 text-white rounded-md shadow hover:bg-indigo-700\">Validate</button>
    </form>
    """

    report_block = ""
    if report:
        report_block = f"""
        <div class=\"mt-8\">
            <h2 class=\"text-xl font-semibold text-gray-800\">Validation Report</h2>
            <pre class=\"mt-3 bg-gray-900 text-green-100 p-4 rounded-lg whitespace-pre-wrap text-sm\">{escape(report)}</pre>
        </div>
        """

    return _layout(text_form + report_block)


@app.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Serve the metadata submission form."""

    return HTMLResponse(_form_page())


@app.post("/validate", response_class=HTMLResponse)
async def validate_form(text: str = Form(...)) -> HTMLResponse:
    """Validate pasted metadata and return a formatted report."""

    warnings = _check_text(text)
    return HTMLResponse(_form_page(text, render_report(warnings)))


@app.post("/api/validate", response_model=ValidateResponse)
async def validate_api(payload: ValidateRequest) -> ValidateResponse:
    """Validate metadata and return machine-readable warnings."""

    warnings = _check_text(payload.text)
    return ValidateResponse(
        valid=not warnings,
        warnings=[_warning_out(warning) for warning in warnings],
    )


def main() -> None:
    """Run the FastAPI app using uvicorn."""

    import uvicorn

    uvicorn.run("dep12.web:app", host="0.0.0.0", port=8000, reload=False)


__all__ = ["app", "main"]
