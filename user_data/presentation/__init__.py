from .lambda_handler import ApiGatewayHandler, respond

__all__ = ["ApiGatewayHandler", "respond"]
