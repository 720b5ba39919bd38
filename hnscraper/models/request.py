from typing import Optional

from pydantic import BaseModel


class FrontPageRequest(BaseModel):
    proxy: Optional[str] = None
    """Forward proxy applied to both HTTP and HTTPS traffic.

    Left as a plain string so a malformed proxy is reported by the fetcher
    with the same message the command line prints.
    """
