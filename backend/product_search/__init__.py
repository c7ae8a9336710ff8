"""Buscador de productos: score de relevancia, filtros, orden y explicaciones."""
