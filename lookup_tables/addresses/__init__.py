"""
Addresses Example App

The schema the lookup tables were designed around:

    addresses              states
     * id                   * id
     * street               * name => "ut", "ga", "il", ...
     * state_id             * description
     * zip

Used by the test suite and as a reference for wiring lookup tables into a
project.
"""
