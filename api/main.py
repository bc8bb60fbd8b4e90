from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
import logging
import os
import threading

from hashtree import HashTreeMap, get_hash_func

logger = logging.getLogger(__name__)

app = FastAPI()


class Record(BaseModel):
    key: str
    value: str


@app.on_event("startup")
def startup_event() -> None:
    """Create the shared map using the hash function named in ``HASH_FUNC``."""
    name = os.environ.get("HASH_FUNC", "sha1")
    app.state.hash_func_name = name
    app.state.store = HashTreeMap(get_hash_func(name))
    # the map itself does no locking
    app.state.lock = threading.Lock()
    logger.info("map service started with hash function %s", name)


@app.get("/health")
def health() -> dict:
    with app.state.lock:
        items = len(app.state.store)
    return {"status": "ok", "items": items, "hash_func": app.state.hash_func_name}


@app.get("/get/{key}")
def get_value(key: str):
    """Retrieve the value stored under ``key``."""
    with app.state.lock:
        value, found = app.state.store.get(key)
    if not found:
        raise HTTPException(status_code=404, detail="key not found")
    return {"key": key, "value": value}


@app.post("/put/{key}")
def put_value(key: str, value: str):
    """Store ``value`` under ``key``."""
    with app.state.lock:
        app.state.store.insert(key, value)
    return {"status": "ok"}


@app.post("/data/records")
def put_record(record: Record):
    with app.state.lock:
        app.state.store.insert(record.key, record.value)
    return {"status": "ok"}


@app.delete("/delete/{key}")
def delete_value(key: str):
    with app.state.lock:
        removed = app.state.store.remove(key)
    if not removed:
        raise HTTPException(status_code=404, detail="key not found")
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=False)
