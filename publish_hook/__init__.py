"""Post-publish hook that imports recording metadata into b3scale."""
