"""FastAPI routes for room upload, chat, and reset."""

from fastapi import APIRouter, File, HTTPException, Request, UploadFile
from pydantic import BaseModel

from controllers.room_controller import get_room_view, reset_room, send_message, upload_room_photo

router = APIRouter(prefix="/room")


class MessagePayload(BaseModel):
	text: str


@router.get("")
async def room_view_route(request: Request):
	try:
		return await get_room_view(request)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))


@router.post("/upload")
async def upload_route(request: Request, file: UploadFile = File(...)):
	"""Upload a room photo; analysis starts right away."""
	try:
		return await upload_room_photo(request, file)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))


@router.post("/messages")
async def message_route(request: Request, payload: MessagePayload):
	try:
		return await send_message(request, payload.text)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))


@router.post("/reset")
async def reset_route(request: Request):
	try:
		return await reset_room(request)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))
