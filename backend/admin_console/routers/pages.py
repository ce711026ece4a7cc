"""Routes shared by every record table: view, export, toasts."""

from typing import Callable, List, Optional, Type

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from .. import schemas
from ..exceptions import InvalidStatusError
from ..services.analytics import status_breakdown
from ..services.controllers import PageController


def page_router(name: str, model: Type, tag: str, controller: Callable[..., PageController]) -> APIRouter:
    """Build the router for one page; entity-specific routes are added by the caller."""
    router = APIRouter(prefix=f"/{name}", tags=[tag])

    @router.get("/", response_model=schemas.PageView[model])
    def list_page(
        search: Optional[str] = Query(None, max_length=200),
        status_filter: Optional[str] = Query(None, alias="status"),
        page: Optional[int] = Query(None, ge=1),
        page_size: Optional[int] = Query(None, ge=1, le=100),
        page_controller: PageController = Depends(controller),
    ):
        try:
            return page_controller.apply(search=search, status=status_filter, page_size=page_size, page=page)
        except InvalidStatusError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    @router.get("/export")
    def export_page(page_controller: PageController = Depends(controller)):
        result = page_controller.export()
        if result is None:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Nothing to export")
        return Response(
            content=result.content,
            media_type=result.media_type,
            headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
        )

    @router.get("/summary", response_model=schemas.StatusBreakdown)
    def summarize_page(page_controller: PageController = Depends(controller)):
        return status_breakdown(page_controller.store.list())

    @router.get("/notifications", response_model=List[schemas.NotificationOut])
    def list_notifications(page_controller: PageController = Depends(controller)):
        return [
            schemas.NotificationOut.model_validate(notification, from_attributes=True)
            for notification in page_controller.notifications.visible()
        ]

    @router.delete("/notifications/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
    def dismiss_notification(notification_id: str, page_controller: PageController = Depends(controller)):
        if not page_controller.notifications.dismiss(notification_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")

    @router.post("/leave", status_code=status.HTTP_204_NO_CONTENT)
    def leave_page(page_controller: PageController = Depends(controller)):
        page_controller.leave()

    return router
