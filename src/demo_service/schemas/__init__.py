from demo_service.schemas.demo import DemoResponse

__all__ = ["DemoResponse"]
