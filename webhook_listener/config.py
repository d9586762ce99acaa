# webhook_listener/config.py
from dotenv import load_dotenv
import os
from typing import Optional

# load local .env if present
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///webhook_listener/dev.sqlite"

def _get_param_from_ssm(name: str, decrypt: bool = False) -> Optional[str]:
    """
    Try to fetch from SSM when SSM_PARAMETER_PREFIX is set. Import the boto3
    helper lazily so imports don't fail if boto3/SSM isn't reachable.
    """
    prefix = os.getenv("SSM_PARAMETER_PREFIX")
    if not prefix:
        return None
    try:
        from .utils.ssm import get_param
        return get_param(f"{prefix.rstrip('/')}/{name}", decrypt=decrypt)
    except Exception:
        return None

def _get_param_with_fallback(name: str, decrypt: bool = False, default: Optional[str] = None) -> Optional[str]:
    val = _get_param_from_ssm(name, decrypt=decrypt)
    if val:
        return val
    return os.getenv(name, default)

def get_table_name() -> Optional[str]:
    return _get_param_with_fallback("TABLE_NAME") or None

def get_database_url() -> str:
    db = _get_param_with_fallback("DATABASE_URL")
    if db:
        return db
    return DEFAULT_DATABASE_URL

def get_aws_region() -> str:
    return os.getenv("AWS_REGION", os.getenv("AWS_DEFAULT_REGION", "us-east-1"))

def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()

class Config:
    TABLE_NAME = get_table_name()
    DATABASE_URL = get_database_url()
    AWS_REGION = get_aws_region()
    LOG_LEVEL = get_log_level()
