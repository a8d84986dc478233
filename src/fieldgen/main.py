from fastapi import FastAPI, HTTPException, Request

from fieldgen.router import route
from fieldgen.utils.exceptions import FieldGenError

app = FastAPI(
    title="Column Field Generator",
    version="1.0.0"
)


@app.post("/generate-fields")
def generate_fields(payload: dict, request: Request):
    try:
        return route(payload, request.headers)
    except FieldGenError as e:
        # bad settings or column records are client errors
        raise HTTPException(
            status_code=422,
            detail={
                "status": "ERROR",
                "message": str(e),
            }
        )
