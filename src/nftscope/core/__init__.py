"""Core decoding pipeline"""
