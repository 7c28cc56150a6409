"""Swarm Shooter - top-down arcade shooter with a tutorial and a difficulty ramp"""
