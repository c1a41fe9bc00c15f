"""Juego de consola: adivinar el día de la semana de una fecha aleatoria."""

__version__ = "0.1.0"
