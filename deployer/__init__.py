"""
Deployer Package
Orchestrates contract deployment and reports the outcome
"""

from .deployment import DeploymentOrchestrator, DeploymentResult, report

__all__ = ['DeploymentOrchestrator', 'DeploymentResult', 'report']
