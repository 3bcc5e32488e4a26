"""Shared constants for camux.gcp types."""

from __future__ import annotations

DEFAULT_PROJECT_NAME = "camux"

REQUIRED_APIS: tuple[str, ...] = (
    "smartdevicemanagement.googleapis.com",
    "cloudresourcemanager.googleapis.com",
    "iam.googleapis.com",
    "iap.googleapis.com",
    "iamcredentials.googleapis.com",
)

SERVICE_ACCOUNT_ID = "camera-viewer-sa"
SERVICE_ACCOUNT_DISPLAY_NAME = "Camera Viewer Service Account"

CONFIG_KEYS: tuple[str, ...] = ("projectName", "billingAccount", "organizationId")

OUTPUT_KEYS: tuple[str, ...] = (
    "projectId",
    "projectNumber",
    "serviceAccountEmail",
    "serviceAccountKey",
    "nextSteps",
)
SECRET_OUTPUTS = frozenset({"serviceAccountKey"})

NEXT_STEPS = """
Manual steps required:

1. Configure OAuth consent screen:
   - Go to https://console.cloud.google.com/apis/credentials/consent
   - Select your project
   - Configure consent screen (external or internal based on your needs)
   - Add scopes: https://www.googleapis.com/auth/sdm.service

2. Create OAuth2 credentials:
   - Go to https://console.cloud.google.com/apis/credentials
   - Click "Create Credentials" > "OAuth client ID"
   - Application type: Web application
   - Add authorized redirect URI: http://localhost:5000/api/auth/callback
   - Save the Client ID and Client Secret

3. Create Device Access Project:
   - Go to https://console.nest.google.com/device-access
   - Create a new project ($5 one-time fee)
   - Link it to your Google Cloud project
   - Note the Project ID

4. Update your .env file with the credentials
"""

__all__ = [
    "CONFIG_KEYS",
    "DEFAULT_PROJECT_NAME",
    "NEXT_STEPS",
    "OUTPUT_KEYS",
    "REQUIRED_APIS",
    "SECRET_OUTPUTS",
    "SERVICE_ACCOUNT_DISPLAY_NAME",
    "SERVICE_ACCOUNT_ID",
]
