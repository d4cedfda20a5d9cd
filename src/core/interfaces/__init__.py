"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) para el transporte HTTP y el resaltador.
- Permite invertir dependencias: el Core depende de abstracciones.
"""
