"""
Pi-hole CLI - Declarative management client for a Pi-hole appliance.

Manages custom DNS host entries, CNAME aliases, groups and the global
ad-blocking toggle through the appliance's HTTP management API.
"""

__version__ = "1.0.0"
__prog_name__ = "pihole"
