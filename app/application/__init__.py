"""Application layer: request/response DTOs, one use case per operation."""
