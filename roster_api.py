import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, UploadFile, File
from fastapi.responses import PlainTextResponse

import config
from count_students import (
    LOAD_FAILURE_MESSAGE,
    LoadFailure,
    format_report,
    load_database,
    parse_roster,
)

logger = logging.getLogger(__name__)

app = FastAPI()

STUDENTS_BANNER = "This is the list of our students"


@app.get("/", response_class=PlainTextResponse)
def index():
    return "Hello from the roster reporter!"


@app.get("/students", response_class=PlainTextResponse)
def list_students():
    """Report on the roster database configured for this server."""
    try:
        roster = parse_roster(load_database(config.DATABASE_PATH))
    except LoadFailure as e:
        raise HTTPException(status_code=500, detail=str(e))

    return "\n".join([STUDENTS_BANNER] + format_report(roster))


# Fast api endpoint
@app.post("/students/upload")
async def upload_roster(roster_file: Optional[UploadFile] = File(None)):
    if not roster_file:
        raise HTTPException(
            status_code=400,
            detail="The 'roster_file' is required.",
        )

    contents = await roster_file.read()
    try:
        text = contents.decode(config.FILE_ENCODING)
    except UnicodeDecodeError as e:
        logger.error(f"Error decoding uploaded roster {roster_file.filename}: {e}")
        raise HTTPException(status_code=400, detail=LOAD_FAILURE_MESSAGE)

    roster = parse_roster(text)
    print(f"Successfully parsed roster. Found {roster.total} students.")

    return {
        "total": roster.total,
        "fields": {
            field_name: {"count": len(names), "names": names}
            for field_name, names in roster.fields.items()
        },
        "report": format_report(roster),
    }


if __name__ == "__main__":
    import uvicorn

    config.setup_logging()
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
