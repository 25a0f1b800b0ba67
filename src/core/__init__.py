"""Core de wpj-guard: dominio, servicios y configuración.

El Core no conoce la CLI ni los detalles de proceso/HTTP; los adaptadores
se inyectan desde fuera.
"""

__version__ = "0.1.0"
