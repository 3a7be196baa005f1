"""MWS transport adapter."""
import logging
from typing import Callable, Dict, Optional

import requests

from config import MwsApiConfig
from mwsfba.builder.request import Request

logger = logging.getLogger(__name__)

# (method, host, path, params) -> signed params
Signer = Callable[[str, str, str, Dict[str, str]], Dict[str, str]]


class MwsClient:
    """Posts finalized request parameters to an MWS endpoint."""

    def __init__(
        self,
        config: MwsApiConfig,
        signer: Optional[Signer] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize client.

        Args:
            config: Endpoint configuration
            signer: Adds authentication parameters; the client never signs
            session: Shared HTTP session, a new one is created if omitted
        """
        self.config = config
        self.signer = signer
        self.session = session or requests.Session()

    def build_url(self, request: Request) -> str:
        return f"{self.config.scheme}://{self.config.host}{request.path}"

    def build_params(self, request: Request) -> Dict[str, str]:
        """Finalize the request and add the configured seller identifiers."""
        params = request.finalize()

        if self.config.seller_id:
            params["SellerId"] = self.config.seller_id
        if self.config.auth_token:
            params["MWSAuthToken"] = self.config.auth_token

        if self.signer is not None:
            params = self.signer("POST", self.config.host, request.path, params)

        return params

    def invoke(self, request: Request) -> str:
        """
        Send a request.

        Returns:
            Raw response body; interpreting it is up to the caller

        Raises:
            RequestBuildError: if the request parameters are invalid
            requests.RequestException: on transport failure or non-2xx status
        """
        params = self.build_params(request)
        url = self.build_url(request)

        logger.info(f"POST {url} Action={request.action}")
        try:
            response = self.session.post(url, data=params, timeout=self.config.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"{request.action} failed: {e}")
            raise

        return response.text
