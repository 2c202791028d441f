"""
AWS Lambda handler for GigaChat Relay

This module provides the Lambda handler for FastAPI requests.
It routes all requests through the FastAPI application.
"""

from mangum import Mangum

from gigachat_relay.main import create_app

# Create Mangum adapter for FastAPI
handler = Mangum(create_app(), lifespan="off")
