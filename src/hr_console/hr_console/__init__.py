"""HR Console package.

Client-side core of the HR admin console: the bearer-token session, the gateway
to the REST backend, the employee directory and the attendance analytics.
A thin Flask layer exposes it to the browser.
"""
