import os
import warnings
from typing import Any, Dict, Optional

import requests

# Configuration for a running phrase comparison service
SERVICE_URL = os.getenv("PHRASE_COMPARE_SERVICE_URL", "http://localhost:5000")


def remote_analyze(
    submission: str,
    reference: str,
    base_url: Optional[str] = None,
    timeout: float = 10,
) -> Optional[Dict[str, Any]]:
    """
    Analyze a submission against a reference using a running comparison service.

    Args:
        submission: The submitted phrase.
        reference: The reference phrase.
        base_url: Service root; defaults to PHRASE_COMPARE_SERVICE_URL.
        timeout: Request timeout in seconds.

    Returns:
        The analysis as a dict (see Analysis.to_dict), or None if the service failed.
    """
    url = (base_url or SERVICE_URL).rstrip("/") + "/api/analyze"

    try:
        response = requests.post(
            url, json={"submission": submission, "reference": reference}, timeout=timeout
        )

        if response.status_code == 200:
            return response.json()
        else:
            warnings.warn(f"Comparison service returned error: {response.status_code} - {response.text}")
            return None

    except requests.exceptions.ConnectionError:
        warnings.warn(f"Could not connect to comparison service at {url} (is it running?).")
        return None
    except requests.exceptions.RequestException as e:
        warnings.warn(f"Comparison request failed: {str(e)}")
        return None
