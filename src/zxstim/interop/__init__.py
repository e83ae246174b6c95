"""Provides interoperability between ``zxstim`` and external frameworks / formats."""
