"""What-if projections of the engine under synthetic market conditions"""
