import multiprocessing
import os
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, HTTPException, Query, Request, Security
from starlette.concurrency import run_in_threadpool
from starlette.responses import RedirectResponse, Response

from api.webhook_controller import whatsapp_signature_header
from di.di import DI
from util import log
from util.config import config
from util.functions import mask_secret

# applications register their handlers on `di.handler_registry` before the server starts
di = DI()


# noinspection PyUnusedLocal
@asynccontextmanager
async def lifespan(owner: FastAPI):
    process_name = multiprocessing.current_process().name
    worker_type = "main" if process_name == "MainProcess" else "worker"
    worker_info = f"[{worker_type}-{os.getpid()}] {process_name}"
    log.i(f"Lifecycle: Starting up {worker_info}")
    if config.whatsapp_must_auth:
        log.i(f"  Signature validation is on, app secret '{mask_secret(config.whatsapp_app_secret)}'")
    else:
        log.w("  Signature validation is off, any caller can deliver notifications")
    registered_slots = [slot.value for slot in di.handler_registry.registered_slots()]
    log.i(f"  Registered webhook handlers: {registered_slots or 'none'}")
    yield  # this holds the app alive until the server is shut down
    log.i(f"Lifecycle: Shutting down {worker_info}...")


app = FastAPI(
    docs_url = None,
    redoc_url = None,
    title = "WhatsApp Webhook Router",
    description = "Receives WhatsApp Business webhook notifications and routes every event to its handler.",
    debug = config.log_level in ["local", "trace", "debug"],
    lifespan = lifespan,
)


@app.get("/")
def root() -> RedirectResponse:
    return RedirectResponse(url = config.website_url)


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "version": config.version}


@app.get("/whatsapp/webhook")
def whatsapp_webhook_verification(
    mode: str | None = Query(default = None, alias = "hub.mode"),
    challenge: str | None = Query(default = None, alias = "hub.challenge"),
    verify_token: str | None = Query(default = None, alias = "hub.verify_token"),
) -> Response:
    return di.webhook_controller.verify_subscription(mode, challenge, verify_token)


@app.post("/whatsapp/webhook")
async def whatsapp_webhook_notification(
    request: Request,
    signature: str | None = Security(whatsapp_signature_header),
) -> Response:
    # the raw bytes are needed, signatures are computed over the exact body
    body = await request.body()
    try:
        return await run_in_threadpool(di.webhook_controller.receive_notification, body, signature)
    except Exception as e:
        raise HTTPException(status_code = 500, detail = {"reason": log.e("Failed to handle the WhatsApp notification", e)})


# The main runner
if __name__ == "__main__":
    if "--dev" in sys.argv:  # when running locally...
        os.environ["LOG_LEVEL"] = "debug"
        config.log_level = "debug"
        workers = 1
        reload = True
        print("INFO:     Launching in dev mode...")
    else:  # when running in production...
        if not config.whatsapp_must_auth:
            print("WARN:     Signature validation is off in production mode!", file = sys.stderr)
        workers = 2
        reload = False
        print("INFO:     Launching in production mode...")
    uvicorn_log_level = "debug" if config.log_level == "local" else config.log_level

    # get the service version
    if (version_file := Path("./.version")).exists():
        version_name = version_file.read_text().strip()
        if version_name:
            os.environ["VERSION"] = version_name
            config.version = version_name
            print("INFO:     Version file found", f"v{config.version}")
        else:
            print("ERROR:    Version file empty", file = sys.stderr)
    else:
        print("ERROR:    Version file not found, using dev version", file = sys.stderr)

    # finally, start the server
    uvicorn.run(
        "main:app",
        host = "0.0.0.0",
        port = 80,
        log_level = uvicorn_log_level,
        workers = workers,
        reload = reload,
    )
