# webhook_listener/utils/ssm.py
import logging
from typing import Optional

import boto3

from .. import config

logger = logging.getLogger(__name__)

def get_param(name: str, decrypt: bool = True) -> Optional[str]:
    """
    Fetch a parameter from AWS SSM Parameter Store.

    Returns None when the parameter does not exist so the caller can fall
    back to the environment; any other AWS error is raised.
    """
    client = boto3.client("ssm", region_name=config.get_aws_region())
    try:
        resp = client.get_parameter(Name=name, WithDecryption=decrypt)
    except client.exceptions.ParameterNotFound:
        logger.debug("SSM parameter %s not found", name)
        return None
    return resp["Parameter"]["Value"]
