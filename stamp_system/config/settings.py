"""Application settings using Pydantic BaseSettings for environment variable management."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Attributes:
        rpc_url: Default chain RPC endpoint used for reverse-name lookups
        staking_subgraph_url: GraphQL endpoint of the GTC staking subgraph
        staking_round: Staking round the subgraph queries are scoped to
        iam_url: Base URL of the IAM service exposing the bulk check endpoint
        iam_version: API version segment used when calling the IAM service
        request_timeout_seconds: Transport timeout for outbound HTTP calls
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log output format (json for production, console for dev)
    """

    rpc_url: str = Field(
        default="https://cloudflare-eth.com",
        description="Chain RPC endpoint for ENS reverse resolution"
    )
    staking_subgraph_url: str = Field(
        default="https://api.thegraph.com/subgraphs/name/moonshotcollective/gtc-staking",
        description="GTC staking subgraph GraphQL endpoint"
    )
    staking_round: str = Field(
        default="1",
        description="Staking round id used to scope subgraph queries"
    )
    iam_url: str = Field(
        default="http://localhost:8003/api/",
        description="IAM service base URL"
    )
    iam_version: str = Field(
        default="0.0.0",
        description="IAM API version (rendered as /v<version>/check)"
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for outbound HTTP requests"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: json or console"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance - import this throughout the application
settings = Settings()
