"""Schemas for the workspace (active tab) and the public API documentation."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class TabRequest(BaseModel):
    tab: str = Field(..., description="detector, api, tools or chat")


class WorkspaceView(BaseModel):
    """Overview of the store: active tab and the phase of every session."""

    activeTab: str
    detector: str
    transcription: str
    speech: str
    chatTurns: int
    chatComposing: bool


class LanguageView(BaseModel):
    code: str
    label: str


class ApiExampleView(BaseModel):
    """Example request/response of the public detection endpoint."""

    endpoint: str
    apiKeyHeader: str
    curl: str
    request: Dict[str, Any]
    response: Dict[str, Any]
    languages: List[LanguageView]
