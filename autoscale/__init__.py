"""Auto-scaling demo platform: product catalog and stock microservices"""

__version__ = "1.0.0"
