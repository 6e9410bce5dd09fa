"""firebase-ci commands"""
