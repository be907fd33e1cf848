"""Core: dominio, contratos y servicios de acceso a datos."""
