"""SoapDesk - run the API with uvicorn."""

import uvicorn

from soapdesk.config import settings


if __name__ == "__main__":
    uvicorn.run(
        "soapdesk.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
    )
