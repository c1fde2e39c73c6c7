from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.schemas.search import SearchIn, SearchOut, SearchResults
from app.search.service import search_all

router = APIRouter(prefix="/api/search", tags=["search"])

CACHE_CONTROL = "s-maxage=30, stale-while-revalidate=60"
MSG_EMPTY_QUERY = "Vui lòng nhập từ khóa tìm kiếm"

def _run(db: Session, response: Response, query: str | None, filters=None) -> SearchOut:
    if not query or not query.strip():
        raise HTTPException(status_code=400, detail=MSG_EMPTY_QUERY)

    results = SearchResults.model_validate(search_all(db, query, filters), from_attributes=True)
    if results.total > 0:
        message = f"Tìm thấy {results.total} kết quả"
    else:
        message = "Không tìm thấy kết quả nào"

    response.headers["Cache-Control"] = CACHE_CONTROL
    return SearchOut(query=query, filters=filters, results=results, message=message)

@router.get("", response_model=SearchOut)
def search_get(response: Response, q: str | None = Query(None), db: Session = Depends(get_db)):
    return _run(db, response, q)

@router.post("", response_model=SearchOut)
def search_post(body: SearchIn, response: Response, db: Session = Depends(get_db)):
    return _run(db, response, body.query, body.filters)
