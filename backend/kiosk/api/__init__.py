"""
HTTP routers - call services only, never repositories
"""
