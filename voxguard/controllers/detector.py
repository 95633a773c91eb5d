"""Detection endpoints.

The detector is a two-step flow: upload a file (``POST /detector/file``),
then explicitly start the analysis (``POST /detector/analyze``). The state
can be polled at ``GET /detector`` or awaited with ``?wait=true``.
"""

from fastapi import APIRouter, File, UploadFile

from voxguard.controllers.dependencies import StoreDep, load_upload, reject_intent, settle
from voxguard.views import DetectorStateView, ErrorResponse

router = APIRouter(prefix="/detector", tags=["detector"])

_AUDIO_FILE_UPLOAD = File(...)


@router.get("", response_model=DetectorStateView)
async def get_detector(store: StoreDep) -> DetectorStateView:
    """Return the current detection state."""

    return DetectorStateView.from_state(store.detection.state)


@router.post(
    "/file",
    response_model=DetectorStateView,
    responses={400: {"model": ErrorResponse}},
)
async def select_file(
    store: StoreDep,
    audio_file: UploadFile = _AUDIO_FILE_UPLOAD,
) -> DetectorStateView:
    """Select a new recording; the previous verdict is discarded."""

    blob = await load_upload(audio_file)
    return DetectorStateView.from_state(store.detection.select_file(blob))


@router.post(
    "/analyze",
    response_model=DetectorStateView,
    responses={409: {"model": ErrorResponse}},
)
async def analyze(store: StoreDep, wait: bool = False) -> DetectorStateView:
    """Start analyzing the selected file."""

    session = store.detection
    task = session.analyze()
    if task is None:
        if session.busy:
            raise reject_intent("Analysis already in progress")
        raise reject_intent("Select an audio file first")

    if wait:
        await settle(task)
    return DetectorStateView.from_state(session.state)


@router.post("/reset", response_model=DetectorStateView)
async def reset_detector(store: StoreDep) -> DetectorStateView:
    store.detection.reset()
    return DetectorStateView.from_state(store.detection.state)
