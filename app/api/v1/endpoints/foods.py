"""
Food database endpoints.

Reads are open to any authenticated user; writes need a professional
account.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_superuser, get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.food import AlternativeSort, FoodAlternativesResponse, FoodCreate, FoodResponse, FoodUpdate
from app.services.food_service import FoodService

router = APIRouter()


@router.get("", summary="Search foods.", response_model=list[FoodResponse], )
def search_foods(q: Optional[str] = Query(None, description="Name contains (case-insensitive)"),
                 category: Optional[str] = Query(None),
                 region: Optional[str] = Query(None),
                 supermarket: Optional[str] = Query(None),
                 limit: int = Query(20, ge=1, le=200),
                 db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = FoodService(db)
    return service.search(q, category, region, supermarket, limit)


@router.get("/categories", summary="Distinct food categories.", response_model=list[str], )
def list_categories(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = FoodService(db)
    return service.get_categories()


@router.post("", summary="Add a food (professionals only).", response_model=FoodResponse,
             status_code=status.HTTP_201_CREATED, )
def create_food(data: FoodCreate, db: Session = Depends(get_db), user: User = Depends(get_current_superuser), ):
    service = FoodService(db)
    return service.create(data)


@router.get("/{food_id}", summary="Get a food.", response_model=FoodResponse, )
def get_food(food_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = FoodService(db)
    return service.get(food_id)


@router.put("/{food_id}", summary="Update a food (professionals only).", response_model=FoodResponse, )
def update_food(food_id: int, data: FoodUpdate, db: Session = Depends(get_db),
                user: User = Depends(get_current_superuser), ):
    service = FoodService(db)
    return service.update(food_id, data)


@router.delete("/{food_id}", summary="Delete a food (professionals only).", status_code=status.HTTP_204_NO_CONTENT, )
def delete_food(food_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_superuser), ):
    service = FoodService(db)
    service.delete(food_id)


@router.get("/{food_id}/alternatives", summary="Foods with the closest macro profile.",
            response_model=FoodAlternativesResponse, )
def get_alternatives(food_id: int,
                     q: Optional[str] = Query(None, description="Filter the shortlist by name, brand or category"),
                     sort_by: AlternativeSort = Query("similarity"),
                     limit: Optional[int] = Query(None, ge=1, le=100, description="Shortlist size"),
                     db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = FoodService(db)
    return service.get_alternatives(food_id, q, sort_by, limit)
