"""AWS Lambda entry point.

Mangum translates API Gateway proxy events (REST v1 and HTTP API v2) into
ASGI, so the FastAPI app runs unchanged on Lambda.
"""

from mangum import Mangum

from hello_lambda.application.api.main import app

handler = Mangum(app, lifespan="off")
