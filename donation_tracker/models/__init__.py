"""
Models Package

Exports all models for easy importing.
"""

from donation_tracker.models.account import Account
from donation_tracker.models.donor import Donor, Donation

__all__ = ['Account', 'Donor', 'Donation']
