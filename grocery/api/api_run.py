from fastapi import FastAPI, APIRouter, Depends, HTTPException, Response
from typing import Any, Dict
import logging

from dotenv import load_dotenv

from grocery.infra.GroceryList_Repository import GroceryListStore
from grocery.infra.pdf_utils import generate_pdf_for_list
from grocery.logic.reporting.summary import compute_list_summary
from grocery.logic.shopping.engine import GroceryListEngine, default_engine
from grocery.logic.shopping.service import (
    default_store,
    generate_grocery_list,
    get_grocery_list,
    get_user_grocery_lists,
    update_grocery_item,
)
from grocery.utilities.errors import ERROR_INVALID_PROFILE, ERROR_NOT_FOUND
from grocery.utilities.validators import GenerateListInput, ItemUpdateInput

load_dotenv()

# Logging
logger = logging.getLogger("grocery_app")

ERROR_STATUS = {
    ERROR_INVALID_PROFILE: 400,
    ERROR_NOT_FOUND: 404,
}

# Initialize FastAPI app
app = FastAPI(title="Grocery List API")
router = APIRouter(prefix="/api/grocery-lists")


# -------------------- Dependencies --------------------
def get_store() -> GroceryListStore:
    return default_store()


def get_engine() -> GroceryListEngine:
    return default_engine()


def _unwrap(result: Dict[str, Any]):
    """Return result data or raise the HTTPException matching the failure code."""
    if result.get("success"):
        return result.get("data")
    status = ERROR_STATUS.get(result.get("code"), 500)
    raise HTTPException(status_code=status, detail=result.get("error", "Unknown error"))


# -------------------- API: Grocery lists --------------------
@router.post("", status_code=201)
def api_generate_list(payload: GenerateListInput,
                      store: GroceryListStore = Depends(get_store),
                      engine: GroceryListEngine = Depends(get_engine)):
    """Generate and store a new grocery list for the user."""
    logger.info("Generate grocery list request user=%s", payload.userId)
    profile = payload.profile.model_dump()
    grocery_list = _unwrap(generate_grocery_list(payload.userId, profile, store=store, engine=engine))
    return grocery_list.to_dict()


@router.get("/user/{user_id}")
def api_user_lists(user_id: str, store: GroceryListStore = Depends(get_store)):
    """Return all lists of a user, most recent first."""
    lists = _unwrap(get_user_grocery_lists(user_id, store=store))
    return {"userId": user_id, "count": len(lists), "lists": [gl.to_dict() for gl in lists]}


@router.get("/{list_id}")
def api_get_list(list_id: str, store: GroceryListStore = Depends(get_store)):
    return _unwrap(get_grocery_list(list_id, store=store)).to_dict()


@router.patch("/{list_id}/items/{item_id}")
def api_update_item(list_id: str, item_id: str, payload: ItemUpdateInput,
                    store: GroceryListStore = Depends(get_store)):
    """Check / uncheck or mark purchased one item."""
    _unwrap(update_grocery_item(list_id, item_id, payload.fields(), store=store))
    return {"success": True}


@router.get("/{list_id}/summary")
def api_list_summary(list_id: str, store: GroceryListStore = Depends(get_store)):
    """Shopping progress plus per-category counts and subtotals."""
    return compute_list_summary(_unwrap(get_grocery_list(list_id, store=store)))


@router.get("/{list_id}/pdf")
def api_list_pdf(list_id: str, store: GroceryListStore = Depends(get_store)):
    grocery_list = _unwrap(get_grocery_list(list_id, store=store))
    pdf_bytes = generate_pdf_for_list(grocery_list)
    filename = f"grocery_list_{list_id}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


app.include_router(router)
