"""AnalyseHub dashboard: campaign hierarchy browsing with selection and date filters."""
