"""vocab-drill: practice-session engine for vocabulary learning."""
