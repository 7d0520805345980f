from fastapi import FastAPI, Depends, Request, Response

from hello_lambda.application.settings import get_settings, Settings
from hello_lambda.application.log_setup import setup_logging
from hello_lambda.application.handlers.hello_handler import HelloHandler, HelloRequest
from hello_lambda.application.services.logger_service import LogContext, LoggerService

# Configure logging once, before the first request
app_logger = setup_logging()

app = FastAPI(title="Hello Lambda")

# --- Dependencies ---
def settings_dep() -> Settings:
    return get_settings()

def logger_dep() -> LoggerService:
    return app_logger

def hello_handler_dep(logger: LoggerService = Depends(logger_dep)) -> HelloHandler:
    return HelloHandler(logger=logger)


def log_context_from_request(request: Request) -> LogContext:
    """Collect correlation ids from the API Gateway event (when running under
    Mangum) and from the usual tracing headers."""
    # Mangum puts the raw Lambda event in the ASGI scope
    event = request.scope.get("aws.event") or {}
    request_context = event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}
    headers = request.headers

    return LogContext(
        request_id=request_context.get("requestId") or headers.get("x-request-id"),
        trace_id=headers.get("x-amzn-trace-id"),
        correlation_id=headers.get("x-correlation-id"),
        # REST authorizers put principalId at the top, HTTP API Lambda authorizers under "lambda"
        user_id=authorizer.get("principalId") or (authorizer.get("lambda") or {}).get("principalId"),
    )


@app.get("/", tags=["meta"])
def root(settings: Settings = Depends(settings_dep)):
    return {
        "ok": True,
        "app_name": settings.app_name,
        "environment": settings.app_env,
        "debug": settings.debug,
    }


@app.get("/hello", tags=["hello"])
def hello(request: Request, handler: HelloHandler = Depends(hello_handler_dep)):
    result = handler.handle(
        HelloRequest(
            query_params=dict(request.query_params),
            http_method=request.method,
            path=request.url.path,
            context=log_context_from_request(request),
        )
    )
    # success bodies are plain text, error bodies carry their own JSON content type
    media_type = result.headers.get("Content-Type", "text/plain")
    return Response(content=result.body, status_code=result.status_code, media_type=media_type)
