import sys

from aws_lambda_powertools import Logger

SERVICE_NAME = "hotel-reservation"


def get_logger(service_name: str = SERVICE_NAME) -> Logger:
    # stdout belongs to the console menu
    return Logger(service=service_name, stream=sys.stderr)


def set_log_level(level: str, service_name: str = SERVICE_NAME) -> None:
    """Change the level of every logger sharing the service name"""
    get_logger(service_name).setLevel(level.upper())
