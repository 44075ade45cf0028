"""
Capa de Infraestructura - Venta de lugares para eventos.

Esta capa contiene las implementaciones concretas de los puertos (interfaces).
Incluye adaptadores para bases de datos, gateways de partners y servicios.

Estructura:
- db/: Repositorios SQL y configuración de base de datos
- gateways/: Adaptadores HTTP para los partners externos
- in_memory/: Implementaciones in-memory para desarrollo y testing
- circuit_breaker.py: Circuit breaker de las llamadas a partners
"""
