"""
Mosaic simulator server: Flask app, render engine and PIL canvas
"""
