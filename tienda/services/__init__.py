"""Servicios que combinan consultas de base de datos con los helpers puros."""
