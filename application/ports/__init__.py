from application.ports.repository_gateway import GatewayResult, RepositoryGateway

__all__ = ["GatewayResult", "RepositoryGateway"]
