"""Workspace endpoints: active tool tab and the public API reference."""

from fastapi import APIRouter, HTTPException, status

from voxguard.config.settings import settings
from voxguard.controllers.dependencies import StoreDep
from voxguard.domain.models import Language
from voxguard.sessions import AppStore, Tab
from voxguard.views import ApiExampleView, LanguageView, TabRequest, WorkspaceView

router = APIRouter(tags=["workspace"])

_EXAMPLE_REQUEST = {
    "language": "English",
    "audioFormat": "mp3",
    "audioBase64": "SUQzBAAAAAAAI1RTU0UAAAAPAAADTGF2ZjU2LjM2LjEwMAAAAAAA...",
}

_EXAMPLE_RESPONSE = {
    "status": "success",
    "language": "Hindi",
    "classification": "AI_GENERATED",
    "confidenceScore": 0.982,
    "explanation": (
        "Artificial prosody and lack of natural phonetic variance detected "
        "in Hindi aspirated stops."
    ),
    "transcription": "नमस्ते, यह एक परीक्षण है।",
}


def _workspace_view(store: AppStore) -> WorkspaceView:
    return WorkspaceView(
        activeTab=store.active_tab.value,
        detector=store.detection.state.phase.value,
        transcription=store.transcription.state.phase.value,
        speech=store.speech.state.phase.value,
        chatTurns=len(store.conversation.turns),
        chatComposing=store.conversation.composing,
    )


@router.get("/workspace", response_model=WorkspaceView)
async def get_workspace(store: StoreDep) -> WorkspaceView:
    return _workspace_view(store)


@router.put("/workspace/tab", response_model=WorkspaceView)
async def select_tab(store: StoreDep, request: TabRequest) -> WorkspaceView:
    """Switch the active tool tab; session state is left untouched."""

    try:
        store.select_tab(request.tab)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown tab {request.tab!r}; expected one of "
            + ", ".join(tab.value for tab in Tab),
        ) from exc
    return _workspace_view(store)


@router.get("/api-docs/example", response_model=ApiExampleView)
async def api_example() -> ApiExampleView:
    """Example call of the public detection endpoint."""

    endpoint = f"{settings.classifier.base_url.rstrip('/')}/voice-detection"
    header = settings.classifier.api_key_header
    curl = (
        f"curl -X POST {endpoint} \\\n"
        '  -H "Content-Type: application/json" \\\n'
        f'  -H "{header}: <your-api-key>" \\\n'
        "  -d '{\n"
        f'    "language": "{_EXAMPLE_REQUEST["language"]}",\n'
        f'    "audioFormat": "{_EXAMPLE_REQUEST["audioFormat"]}",\n'
        f'    "audioBase64": "{_EXAMPLE_REQUEST["audioBase64"]}"\n'
        "  }'"
    )
    return ApiExampleView(
        endpoint=endpoint,
        apiKeyHeader=header,
        curl=curl,
        request=_EXAMPLE_REQUEST,
        response=_EXAMPLE_RESPONSE,
        languages=[LanguageView(code=language.value, label=language.label) for language in Language],
    )
