"""Modelos y constantes del dominio.

Por qué:
- Aquí viven las rutas REST y las estructuras de datos de transferencia.
- El dominio no conoce HTTP ni CLI: solo conceptos de la API.
"""
