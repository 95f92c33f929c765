"""HTTP service for the physgrade validation engine"""
