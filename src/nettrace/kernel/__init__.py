"""Kernel – error hierarchy shared by every nettrace layer."""
