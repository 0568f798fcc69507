"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_BODY = """\
# Heading

A paragraph with **bold** text and a [link to docs](https://example.com/docs).

- item one
- item two

```tsx
const App = () => <Button />;
```

<Sandbox name="function-aschild-button" />
"""

SAMPLE_FM_MD = """\
---
title: Function asChild
description: A closer look at the asChild pattern
published: 2024-03-05T12:34:56.789Z
tags:
  - React
  - Patterns
series: components
---

""" + SAMPLE_BODY


@pytest.fixture(name="sample_body")
def sample_body_fixture():
    return SAMPLE_BODY


@pytest.fixture(name="sample_doc")
def sample_doc_fixture():
    return SAMPLE_FM_MD
