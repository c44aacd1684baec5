from fastapi import APIRouter, Depends, HTTPException, Request, status
from loguru import logger

from revolver.api.body import json_body
from revolver.domain.link import LinkInput
from revolver.domain.note import NoteInput
from revolver.errors import (
    DuplicateLinkError,
    InvalidLinkError,
    InvalidQueryError,
    NoteNotFoundError,
)
from revolver.services.notebook import Notebook

BRAND_GUIDANCE = {
    "visual": (
        "High contrast dark base, warm accent, restrained typography, "
        "radial interaction as hero pattern."
    ),
}


def _note_not_found(err: NoteNotFoundError) -> HTTPException:
    logger.warning(f"Note not found: {err.note_id}")
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found.")


def _create_note_detail_endpoints(router: APIRouter, notebook: Notebook) -> None:
    """Register the read, update and delete handlers for a single note."""

    @router.get("/notes/{note_id}")
    async def get_note(note_id: str):
        try:
            return {"note": notebook.get_note(note_id).to_json_dict()}
        except NoteNotFoundError as err:
            raise _note_not_found(err) from err

    @router.api_route("/notes/{note_id}", methods=["PUT", "PATCH"])
    async def update_note(
        note_id: str,
        body: NoteInput = Depends(json_body(NoteInput)),  # noqa: B008
    ):
        try:
            note = notebook.update_note(note_id, body)
        except NoteNotFoundError as err:
            raise _note_not_found(err) from err
        return {"note": note.to_json_dict()}

    @router.delete("/notes/{note_id}")
    async def delete_note(note_id: str):
        try:
            deleted_id = notebook.delete_note(note_id)
        except NoteNotFoundError as err:
            raise _note_not_found(err) from err
        return {"deletedId": deleted_id}


def _create_link_endpoint(notebook: Notebook):
    """Create the link creation handler."""

    async def create_link(body: LinkInput = Depends(json_body(LinkInput))):  # noqa: B008
        try:
            link = notebook.create_link(body)
        except InvalidLinkError as err:
            logger.warning(f"Rejected link: {err}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
        except DuplicateLinkError as err:
            logger.warning(f"Rejected link: {err}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail="Link already exists."
            ) from err
        return {"link": link.to_json_dict()}

    return create_link


def _create_analyze_endpoint(notebook: Notebook):
    """Create the analyze handler."""

    async def analyze_note(note_id: str):
        try:
            analysis = notebook.analyze(note_id)
        except NoteNotFoundError as err:
            raise _note_not_found(err) from err
        return {"analysis": analysis.to_json_dict()}

    return analyze_note


def get_endpoints_router(*, notebook: Notebook) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        return {"status": "ok", "aiProvider": notebook.provider.provider.value}

    @router.get("/store")
    async def get_store():
        return notebook.get_collection().to_json_dict()

    @router.get("/brand")
    async def get_brand():
        wheel = notebook.get_brand().revolver_wheel
        return {
            "productKey": "revolver-wheel",
            "wheel": wheel.to_json_dict() if wheel else None,
            "guidance": BRAND_GUIDANCE,
        }

    @router.get("/search")
    async def search_notes(q: str = ""):
        try:
            results = notebook.search(q)
        except InvalidQueryError as err:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
        return results.to_json_dict()

    @router.get("/notes")
    async def list_notes():
        return {"notes": [note.to_json_dict() for note in notebook.list_notes()]}

    @router.post("/notes", status_code=status.HTTP_201_CREATED)
    async def create_note(body: NoteInput = Depends(json_body(NoteInput))):  # noqa: B008
        note = notebook.create_note(body)
        return {"note": note.to_json_dict()}

    _create_note_detail_endpoints(router, notebook)

    @router.get("/links")
    async def list_links():
        return {"links": [link.to_json_dict() for link in notebook.list_links()]}

    router.post("/links", status_code=status.HTTP_201_CREATED)(_create_link_endpoint(notebook))

    @router.get("/graph")
    async def get_graph():
        return notebook.build_graph().to_json_dict()

    router.post("/analyze/{note_id}")(_create_analyze_endpoint(notebook))

    @router.api_route(
        "/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
    )
    async def endpoint_not_found(path: str, request: Request):  # noqa: ARG001
        if request.method == "OPTIONS":
            return {"ok": True}
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Endpoint not found.")

    return router
