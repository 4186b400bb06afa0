"""Application layer - models, repositories, services and the DI container."""
