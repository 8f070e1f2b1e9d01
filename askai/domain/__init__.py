"""The askai domain: forwarding prompts to generative AI providers.

Nothing here is stored. A request comes in, exactly one provider call goes
out, and the provider's answer is reshaped and returned.

Providers are reached through two narrow protocols, `TextGenerator` and
`ImageGenerator`, so that tests can fake them and the OpenAI backed versions in
`aopenai` can be swapped without touching the routes.
"""
