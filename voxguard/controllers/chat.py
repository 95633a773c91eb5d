"""Assistant conversation endpoints."""

from fastapi import APIRouter, HTTPException, status

from voxguard.controllers.dependencies import StoreDep, reject_intent, settle
from voxguard.views import ChatRequest, ConversationView, ErrorResponse

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("", response_model=ConversationView)
async def get_conversation(store: StoreDep) -> ConversationView:
    return ConversationView.from_session(store.conversation)


@router.post(
    "",
    response_model=ConversationView,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def send_message(
    store: StoreDep,
    request: ChatRequest,
    wait: bool = False,
) -> ConversationView:
    """Append the user message and request the assistant's reply."""

    session = store.conversation
    if not request.message.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message is empty",
        )

    task = session.submit(request.message)
    if task is None:
        raise reject_intent("The assistant is still composing a reply")

    if wait:
        await settle(task)
    return ConversationView.from_session(session)


@router.post("/reset", response_model=ConversationView)
async def reset_conversation(store: StoreDep) -> ConversationView:
    store.conversation.reset()
    return ConversationView.from_session(store.conversation)
