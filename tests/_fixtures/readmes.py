"""Readme documents shared across the test suite."""

from __future__ import annotations

from typing import List

CDN_README = """
## Configuration

### Basic Information

These are the global settings for the Cdn API.

```yaml
openapi-type: arm
tag: package-2017-10
```

### Tag: package-2017-10

These settings apply only when `--tag=package-2017-10` is specified on the command line.

```yaml $(tag) == 'package-2017-10'
input-file:
- Microsoft.Cdn/stable/2017-10-12/cdn.json
```

### Tag: package-2017-04

These settings apply only when `--tag=package-2017-04` is specified on the command line.

```yaml $(tag) == 'package-2017-04'
input-file:
- Microsoft.Cdn/stable/2017-04-02/cdn.json
```
"""

SUBSCRIPTIONS_README = """

### Basic Information
These are the global settings for the Subscriptions API.

``` yaml
title: SubscriptionsAdminClient
description: Subscriptions Admin Client
openapi-type: arm
tag: package-2015-11-01
```


## Suppression
``` yaml
directive:
  - suppress: XmsResourceInPutResponse
    reason: Subscription and Location are not modelled as ARM resources in azure for legacy reasons. In Azure stack as well, Subscription and Location are not modelled as ARM resource for azure consistency
    where:
      - $.paths["/subscriptions/{subscriptionId}/providers/Microsoft.Subscriptions.Admin/subscriptions/{subscription}"].put
      - $.paths["/subscriptions/{subscriptionId}/providers/Microsoft.Subscriptions.Admin/locations/{location}"].put

  - suppress: SubscriptionIdParameterInOperations
    reason: Subscription is the main resource in the API spec and it should not be masked in global parameters.
    where:
      - $.paths["/subscriptions/{subscriptionId}"].get.parameters[0]
      - $.paths["/subscriptions/{subscriptionId}"].put.parameters[0]

  - suppress: BodyTopLevelProperties
    reason: Subscription is not modelled as ARM resource in azure for legacy reasons.
    where:
      - $.definitions.Subscription.properties
      - $.definitions.Location.properties
```

### Tag: package-2015-11-01

These settings apply only when `--tag=package-2015-11-01` is specified on the command line.

``` yaml $(tag) == 'package-2015-11-01'
input-file:
    - Microsoft.Subscriptions.Admin/preview/2015-11-01/Subscriptions.json
    - Microsoft.Subscriptions.Admin/preview/2015-11-01/AcquiredPlan.json
    - Microsoft.Subscriptions.Admin/preview/2015-11-01/Location.json
```

"""


class RecordingLogger:
    """Collects error messages reported by the manipulator."""

    def __init__(self) -> None:
        self.errors: List[str] = []

    def error(self, message: str) -> None:
        self.errors.append(message)


__all__ = ["CDN_README", "RecordingLogger", "SUBSCRIPTIONS_README"]
