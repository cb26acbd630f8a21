"""
LUMA Server
JSON-file record store for users and artworks, exposed over HTTP
"""
