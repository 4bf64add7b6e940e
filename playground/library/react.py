"""
The element framework exposed to examples as REACT.

`import React, { Component } from 'react'` binds against this namespace.
"""

from __future__ import annotations

from types import SimpleNamespace

from playground.kernel.elements import (
    Children,
    Component,
    Fragment,
    PureComponent,
    clone_element,
    create_element,
    is_valid_element,
)

VERSION = "16.14.0"

react = SimpleNamespace(
    createElement=create_element,
    cloneElement=clone_element,
    isValidElement=is_valid_element,
    Component=Component,
    PureComponent=PureComponent,
    Fragment=Fragment,
    Children=Children,
    version=VERSION,
)
