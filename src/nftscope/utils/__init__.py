"""Reporting helpers"""
