# External package imports
from fastapi import Request

# Local application imports
from ...di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the container built at application startup
    
    Args:
        request: Incoming request (gives access to app.state)
        
    Returns:
        The DI container attached to the running application
    """
    return request.app.state.container
